from .entrypoints.fastapi_app import create_app

# uvicorn address_validation.main:app
app = create_app()
