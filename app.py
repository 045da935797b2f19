from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Path, APIRouter

# Import core modules
import config
from core_logic import logger, ObfuscationError, ValidationException
from models import EncodeResponse, DecodeResponse, TransformParameters, HealthResponse
from mymath import generate_parameters
from obfuscation import Transform, get_transform

# --- LIFESPAN AND APP SETUP ---

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    config.config.validate()
    get_transform.cache_clear()
    get_transform()
    logger.info("Application started successfully")
    try:
        yield
    finally:
        logger.info("Application shutdown complete")

# Main app instance
app = FastAPI(
    title=config.APP_TITLE,
    lifespan=lifespan
)

# --- ROUTERS DEFINITION (API) ---

api_router = APIRouter(prefix="/api/v1", tags=["API"])

@api_router.get("/encode/{item_id}", response_model=EncodeResponse)
async def api_encode(
    item_id: int = Path(..., ge=0),
    transform: Transform = Depends(get_transform),
):
    """Obfuscate a sequential id"""
    try:
        return EncodeResponse(id=item_id, encoded=transform.encode(item_id))
    except ObfuscationError as e:
        logger.warning(f"Rejected encode request: {e}")
        raise ValidationException(detail=str(e))


@api_router.get("/decode/{item_id}", response_model=DecodeResponse)
async def api_decode(
    item_id: int = Path(..., ge=0),
    transform: Transform = Depends(get_transform),
):
    """Recover the sequential id behind an obfuscated one"""
    try:
        return DecodeResponse(id=item_id, decoded=transform.decode(item_id))
    except ObfuscationError as e:
        logger.warning(f"Rejected decode request: {e}")
        raise ValidationException(detail=str(e))


@api_router.get("/parameters", response_model=TransformParameters)
async def api_generate_parameters():
    """Generate a new prime / inverse / random triple"""
    prime, mod_inverse, random = generate_parameters()
    return TransformParameters(prime=prime, mod_inverse=mod_inverse, random=random)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    return HealthResponse()


app.include_router(api_router)
