# hal_greeting/services/greeting_service.py

import logging
from typing import Optional

from hal_greeting.core.counter import AtomicCounter
from hal_greeting.models.greeting import Greeting

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "Hello, %s!"
DEFAULT_NAME = "World"


class GreetingService:

    def __init__(
        self,
        counter: AtomicCounter,
        template: str = DEFAULT_TEMPLATE,
        default_name: str = DEFAULT_NAME,
    ):
        self.counter = counter
        self.template = template
        self.default_name = default_name

    def build(self, name: Optional[str] = None) -> Greeting:
        # any string is accepted verbatim; only None/"" fall back to the default
        if not name:
            name = self.default_name
        greeting = Greeting(id=self.counter.next(), content=self.template % name)
        logger.debug("built greeting id=%d", greeting.id)
        return greeting
