from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..api import ToolDispatcher
from ..config import AppSettings, get_settings
from .base import CalendarAdapter
from .google import GoogleCalendarAdapter
from .memory import InMemoryCalendarAdapter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root wiring settings, the selected adapter and the dispatcher."""

    settings: AppSettings = field(default_factory=get_settings)
    use_mock: bool = False
    adapter: CalendarAdapter = field(init=False)
    dispatcher: ToolDispatcher = field(init=False)

    def __post_init__(self) -> None:
        if self.use_mock:
            self.adapter = InMemoryCalendarAdapter()
        else:
            self.adapter = GoogleCalendarAdapter(self.settings.google)
        self.dispatcher = ToolDispatcher(self.adapter)
        logger.debug("Service context ready with %s adapter", self.adapter.name)
