from pydantic import BaseModel, Field

from config import MAX_ID

class EncodeResponse(BaseModel):
    """Response model for an obfuscated id."""
    id: int
    encoded: int = Field(..., ge=0, le=MAX_ID)

class DecodeResponse(BaseModel):
    """Response model for a recovered id."""
    id: int
    decoded: int = Field(..., ge=0, le=MAX_ID)

class TransformParameters(BaseModel):
    """A freshly generated parameter triple for configuring a transform."""
    prime: int = Field(..., ge=0, le=MAX_ID)
    mod_inverse: int = Field(..., ge=0, le=MAX_ID)
    random: int = Field(..., ge=0, le=MAX_ID)

class HealthResponse(BaseModel):
    status: str = "ok"
