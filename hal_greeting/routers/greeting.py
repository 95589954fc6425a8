# hal_greeting/routers/greeting.py

from typing import Optional

from fastapi import APIRouter, Depends, Request

from hal_greeting.common.deps import get_greeting_service
from hal_greeting.models.greeting import Greeting
from hal_greeting.models.hal import HalJSONResponse
from hal_greeting.services.greeting_service import GreetingService

router = APIRouter(tags=["greeting"])


@router.get("/greeting", response_model=Greeting, response_class=HalJSONResponse)
def greeting(
    request: Request,
    name: Optional[str] = None,
    service: GreetingService = Depends(get_greeting_service),
):
    resource = service.build(name)
    resource.add_link("self", str(request.url))
    return resource
