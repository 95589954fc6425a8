# hal_greeting/common/deps.py

from fastapi import Depends, Request

from hal_greeting.core.config import Settings
from hal_greeting.core.counter import AtomicCounter
from hal_greeting.services.greeting_service import GreetingService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_counter(request: Request) -> AtomicCounter:
    # owned by the app instance, created once in create_app()
    return request.app.state.counter


def get_greeting_service(
    counter: AtomicCounter = Depends(get_counter),
    settings: Settings = Depends(get_settings),
) -> GreetingService:
    return GreetingService(
        counter=counter,
        template=settings.GREETING_TEMPLATE,
        default_name=settings.DEFAULT_NAME,
    )
