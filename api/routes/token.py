"""
Token routes for storing and forgetting the learner's API key.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import TokenRequest
from api.responses import TokenResponse
from api.routes.exception import handle_exceptions
from services import progress_service

router = APIRouter(tags=["Token"])


@router.put("/token", response_model=TokenResponse, summary="Validate and store an API key")
@handle_exceptions
async def store_token(req: TokenRequest) -> TokenResponse:
    user = await progress_service.register_api_key(req.api_key)
    data = user.get("data") or {}
    return TokenResponse(stored=True, username=data.get("username"), level=data.get("level"))


@router.delete("/token", response_model=TokenResponse, summary="Forget the stored API key")
@handle_exceptions
async def delete_token() -> TokenResponse:
    await progress_service.forget_api_key()
    return TokenResponse(stored=False)
