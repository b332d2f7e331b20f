# server.py
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
import logging
from fastapi.middleware.cors import CORSMiddleware

from password_analyzer import (
    DNASegment,
    PasswordCharacteristics,
    analyze,
    analyze_dna,
    classify_death_cause,
    format_characteristics_for_prompt,
    mask_password,
)

# ---------------- CONFIG / THRESHOLDS ----------------
MAX_PASSWORD_LENGTH = 128
CORS_ORIGINS = ["*"]
HOST = "127.0.0.1"
PORT = 8000

logger = logging.getLogger(__name__)

app = FastAPI(title="Dead Credentials - Password Obituary Engine")

# enable CORS for local dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- API MODELS ----------------
class CheckRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    password: str
    breach_count: Optional[int] = None

class DNARequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    password: str

class CheckResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    breach_count: int
    characteristics: PasswordCharacteristics
    dna: List[DNASegment]
    masked_password: str
    summary: str

# ---------------- HELPERS ----------------
def require_password(password: str) -> str:
    if not password:
        raise HTTPException(status_code=400, detail="Password is required")
    if len(password) > MAX_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password too long (max {MAX_PASSWORD_LENGTH} characters)",
        )
    return password

def with_breach_count(chars: PasswordCharacteristics, breach_count: int) -> PasswordCharacteristics:
    """Re-run the death-cause rules once the caller knows how often the password leaked."""
    if not breach_count:
        return chars
    return chars.model_copy(update={"death_cause": classify_death_cause(chars, breach_count)})

# ---------------- ROUTES ----------------
@app.post("/check", response_model=CheckResponse)
def check_pw(req: CheckRequest):
    pw = require_password(req.password)
    breaches = max(0, req.breach_count or 0)

    chars = with_breach_count(analyze(pw), breaches)
    # never log the password itself, only what was derived from it
    logger.info(
        "analyzed password: length=%d score=%d cause=%s breaches=%d",
        chars.length, chars.strength_score, chars.death_cause, breaches,
    )
    return CheckResponse(
        breach_count=breaches,
        characteristics=chars,
        dna=analyze_dna(pw),
        masked_password=mask_password(pw),
        summary=format_characteristics_for_prompt(chars),
    )

@app.post("/dna", response_model=List[DNASegment])
def dna_pw(req: DNARequest):
    pw = require_password(req.password)
    return analyze_dna(pw)

@app.get("/health")
def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run("server:app", host=HOST, port=PORT, reload=True)


# ---------------- End of file ----------------
