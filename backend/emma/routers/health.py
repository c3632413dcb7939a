from fastapi import APIRouter, Depends
from emma.config import ProviderConfig, get_provider_config

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(config: ProviderConfig = Depends(get_provider_config)):
    return {"status": "ok", "mode": config.mode}
