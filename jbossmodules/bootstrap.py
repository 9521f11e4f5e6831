"""Service wiring for the FastAPI application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from collections import deque
from typing import Deque

from jbossmodules.modules.attachmodules import AttachModulesService
from jbossmodules.modules.attachmodules.domain import AttachedArtifact
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    attached_artifacts: Deque[AttachedArtifact] = field(init=False)
    attach_modules_service: AttachModulesService = field(init=False)

    def __post_init__(self) -> None:
        self.attached_artifacts = deque(maxlen=self.settings.attached_history_size)
        self.attach_modules_service = AttachModulesService(
            self.settings,
            attachment_sink=self.register_attachment,
        )

    def register_attachment(self, attachment: AttachedArtifact) -> None:
        log.info(
            "Registered build output type=%s classifier=%s file=%s",
            attachment.type,
            attachment.classifier,
            attachment.file,
        )
        self.attached_artifacts.append(attachment)
