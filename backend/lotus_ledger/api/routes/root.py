"""Root Route: static greeting at /."""

from fastapi import APIRouter

router = APIRouter(tags=["root"])

GREETING = "Hello from Lotus Ledger"


@router.get("/")
async def greeting():
    return {"message": GREETING}
