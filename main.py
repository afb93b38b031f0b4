"""
Main FastAPI application entry point for the Contact Manager API
This file sets up the FastAPI application with configuration, middleware,
exception handlers and the contact endpoints. It serves as the main
entry point for both local development and AWS Lambda deployment.
"""

from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, File, Request, Response, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import traceback
from datetime import datetime, timezone

from schemas.contact import (
    ContactIdRequest,
    ContactPayload,
    ContactResponse,
    ContactUpdateRequest,
    ErrorResponse,
    ImportResponse,
    MergeRequest,
    MergeResponse,
    MessageResponse,
)
from services.contact_service import contact_service
from services.errors import ContactError, InputError
from services.vcard import decode_upload
from database import db_manager
from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup when configured, release connections on shutdown"""
    if settings.AUTO_CREATE_TABLES:
        await db_manager.create_tables()
    yield
    await db_manager.dispose()


# Create FastAPI application instance
app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


# Exception handlers
@app.exception_handler(ContactError)
async def contact_exception_handler(request: Request, exc: ContactError):
    """Render service errors with their own status and message"""
    logger.info(f"{exc.error} for {request.method} {request.url.path}: {exc.message}")

    error_response = ErrorResponse(
        error=exc.error,
        message=exc.message,
        details=exc.details
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump()
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies"""
    logger.warning(f"Validation error for {request.url}: {exc}")

    error_details = []
    for error in exc.errors():
        error_details.append({
            "field": " -> ".join(str(x) for x in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    error_response = ErrorResponse(
        error="ValidationError",
        message="Request validation failed",
        details={"errors": error_details}
    )

    return JSONResponse(
        status_code=400,
        content=error_response.model_dump()
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.error(f"Unexpected error for {request.url}: {exc}")
    logger.error(f"Traceback: {traceback.format_exc()}")

    error_response = ErrorResponse(
        error="InternalServerError",
        message="An unexpected error occurred"
    )

    return JSONResponse(
        status_code=500,
        content=error_response.model_dump()
    )


@app.get("/")
async def root():
    """
    Root endpoint that returns basic API information
    """
    return {
        "message": "Contact Manager API is running",
        "version": settings.API_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancer health checks
    """
    db_status = "connected" if await db_manager.test_connection() else "disconnected"

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "version": settings.API_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "lambda": settings.is_lambda_environment(),
        "database": {
            "status": db_status,
            "sqlite": settings.is_sqlite()
        }
    }


@app.get("/contacts", response_model=List[ContactResponse])
async def list_contacts():
    """
    All contacts in creation order
    """
    contacts = await contact_service.list_contacts()
    return [ContactResponse.from_contact(c) for c in contacts]


@app.post("/contacts", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(payload: ContactPayload):
    """
    Create a contact

    Validation failures return 400 with the first broken rule as message,
    e.g. "Phone number is invalid."
    """
    contact = await contact_service.create_contact(payload)
    return ContactResponse.from_contact(contact)


@app.put("/contacts", response_model=ContactResponse)
async def update_contact(payload: ContactUpdateRequest):
    """
    Update the contact identified by `_id`
    """
    contact = await contact_service.update_contact(payload.id, payload)
    return ContactResponse.from_contact(contact)


@app.delete("/contacts", response_model=MessageResponse)
async def delete_contact(payload: ContactIdRequest):
    """
    Delete the contact identified by `_id`
    """
    await contact_service.delete_contact(payload.id)
    return MessageResponse(message="Contact deleted successfully")


@app.get("/contacts/duplicates", response_model=List[List[ContactResponse]])
async def find_duplicates():
    """
    Groups of contacts with identical name, email and phone

    Only groups with two or more members are returned, in the order the
    first member of each group was created.
    """
    groups = await contact_service.find_duplicates()
    return [[ContactResponse.from_contact(c) for c in group] for group in groups]


@app.post("/contacts/merge", response_model=MergeResponse)
async def merge_contacts(request: MergeRequest):
    """
    Merge contacts into one

    **Algorithm:**
    1. Validate the replacement (name, email, phone)
    2. Delete every contact listed in `contactIds` (unknown ids are ignored)
    3. Create the replacement contact

    Steps 2 and 3 run in one transaction.
    """
    logger.info(f"Processing merge request for contact ids: {request.contactIds}")
    merged = await contact_service.merge_contacts(request.contactIds, request)
    return MergeResponse(
        message="Contacts merged successfully",
        mergedContact=ContactResponse.from_contact(merged)
    )


@app.get("/contacts/export")
async def export_contacts():
    """
    Download every contact as a vCard file (contacts.vcf)
    """
    vcf_data = await contact_service.export_contacts()
    return Response(
        content=vcf_data,
        media_type="text/vcard; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=contacts.vcf"}
    )


@app.post("/contacts/import", response_model=ImportResponse)
async def import_contacts(file: Optional[UploadFile] = File(None)):
    """
    Import contacts from an uploaded vCard file

    Cards missing FN, EMAIL or TEL, and cards whose values fail
    validation, are skipped and counted.
    """
    if file is None:
        raise InputError("No file uploaded.")

    # One byte past the cap is enough to know the upload is too large
    content = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise InputError(f"File too large. Max {settings.MAX_UPLOAD_BYTES} bytes")

    try:
        text = decode_upload(content)
    except UnicodeDecodeError as e:
        logger.warning(f"Unreadable vCard upload {file.filename}: {e}")
        raise InputError("Unable to read uploaded file.")

    result = await contact_service.import_contacts(text)
    return ImportResponse(
        message="Contacts imported successfully.",
        imported=result.imported,
        skipped=result.skipped
    )


# This is the proper way to run the application using uvicorn
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,  # Enable auto-reload in debug mode
        workers=1
    )
