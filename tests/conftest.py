# tests/conftest.py
import httpx
import pytest

from address_validation.adapters.clients.xav_contract import load_contract
from address_validation.domain.address import AddressInput
from address_validation.domain.types import Credentials

ENVELOPE_OPEN = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/" '
    'xmlns:xav="http://www.ups.com/XMLSchema/XOLTWS/xav/v1.0" '
    'xmlns:common="http://www.ups.com/XMLSchema/XOLTWS/Common/v1.0">'
    "<soapenv:Header/>"
    "<soapenv:Body>"
)
ENVELOPE_CLOSE = "</soapenv:Body></soapenv:Envelope>"

RESPONSE_STATUS = (
    "<common:Response><common:ResponseStatus>"
    "<common:Code>1</common:Code><common:Description>Success</common:Description>"
    "</common:ResponseStatus></common:Response>"
)


def candidate_xml(line: str, city: str, state: str, zip5: str, zip4: str = "1234") -> str:
    return (
        "<xav:Candidate>"
        "<xav:AddressClassification><xav:Code>2</xav:Code><xav:Description>Residential</xav:Description></xav:AddressClassification>"
        "<xav:AddressKeyFormat>"
        f"<xav:AddressLine>{line}</xav:AddressLine>"
        f"<xav:PoliticalDivision2>{city}</xav:PoliticalDivision2>"
        f"<xav:PoliticalDivision1>{state}</xav:PoliticalDivision1>"
        f"<xav:PostcodePrimaryLow>{zip5}</xav:PostcodePrimaryLow>"
        f"<xav:PostcodeExtendedLow>{zip4}</xav:PostcodeExtendedLow>"
        "<xav:CountryCode>US</xav:CountryCode>"
        "</xav:AddressKeyFormat>"
        "</xav:Candidate>"
    )


def xav_response(indicator: str | None, *candidates: str, classification: str | None = None) -> str:
    parts = [ENVELOPE_OPEN, "<xav:XAVResponse>", RESPONSE_STATUS]
    if indicator:
        parts.append(f"<xav:{indicator}/>")
    if classification:
        parts.append(
            "<xav:AddressClassification>"
            f"<xav:Code>1</xav:Code><xav:Description>{classification}</xav:Description>"
            "</xav:AddressClassification>"
        )
    parts.extend(candidates)
    parts.append("</xav:XAVResponse>")
    parts.append(ENVELOPE_CLOSE)
    return "".join(parts)


FAULT_RESPONSE = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">'
    "<soapenv:Header/>"
    "<soapenv:Body><soapenv:Fault>"
    "<faultcode>Client</faultcode>"
    "<faultstring>An exception has been raised as a result of client data.</faultstring>"
    "<detail>"
    '<err:Errors xmlns:err="http://www.ups.com/XMLSchema/XOLTWS/Error/v1.1">'
    "<err:ErrorDetail>"
    "<err:Severity>Authentication</err:Severity>"
    "<err:PrimaryErrorCode><err:Code>250003</err:Code>"
    "<err:Description>Invalid Access License number</err:Description></err:PrimaryErrorCode>"
    "</err:ErrorDetail>"
    "</err:Errors>"
    "</detail>"
    "</soapenv:Fault></soapenv:Body></soapenv:Envelope>"
)


class FakeXav:
    """Stands in for the UPS endpoint; records what it was sent."""

    def __init__(self, text: str = "", status_code: int = 200, exc: Exception | None = None) -> None:
        self.text = text
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, text=self.text, headers={"content-type": "text/xml"})

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))

    @property
    def last_body(self) -> str:
        return self.requests[-1].content.decode("utf-8")


@pytest.fixture
def credentials():
    return Credentials(access_key="AK-0123456789ABCDEF", user_id="shipper01", password="s3cret-pa55")


@pytest.fixture
def address():
    return AddressInput(
        addressee="Jane Doe",
        address_line1="123 Main St",
        address_line2="Suite 200",
        city="Birmingham",
        state="MI",
        postal_code="48009",
    )


@pytest.fixture
def contract():
    return load_contract()


@pytest.fixture
def valid_response():
    return xav_response(
        "ValidAddressIndicator",
        candidate_xml("123 MAIN ST STE 200", "BIRMINGHAM", "MI", "48009"),
        classification="Commercial",
    )


@pytest.fixture
def single_candidate_response():
    return xav_response(
        "AmbiguousAddressIndicator",
        candidate_xml("123 MAIN ST", "BIRMINGHAM", "MI", "48009"),
    )


@pytest.fixture
def multi_candidate_response():
    return xav_response(
        "AmbiguousAddressIndicator",
        candidate_xml("123 MAIN ST", "BIRMINGHAM", "MI", "48009", "1111"),
        candidate_xml("123 N MAIN ST", "BIRMINGHAM", "MI", "48009", "2222"),
        candidate_xml("123 S MAIN ST", "BIRMINGHAM", "MI", "48012", "3333"),
    )


@pytest.fixture
def no_candidates_response():
    return xav_response("NoCandidatesIndicator")


@pytest.fixture
def fault_response():
    return FAULT_RESPONSE


@pytest.fixture
def fake_xav():
    return FakeXav


@pytest.fixture
def make_response():
    return xav_response


@pytest.fixture
def make_candidate():
    return candidate_xml
