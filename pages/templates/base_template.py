"""
Base template for configuration-driven UI patterns.

A template binds a declarative selector map to Playwright locators and
lets callers attach custom behavior (actions and validations) through
configuration instead of subclassing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from playwright.sync_api import Locator, Page

from pages.base_page import BasePage
from pages.templates.errors import ConfigurationError, NotFoundError

logger = logging.getLogger(__name__)

# Hooks receive the template instance first, then the caller's arguments.
TemplateHook = Callable[..., Any]


@dataclass(kw_only=True)
class TemplateConfig:
    """
    Declarative description of a UI pattern.

    Attributes:
        template_name: Name used in logs, errors and screenshot names.
        selectors: Element name to selector string.
        actions: Named hooks run through execute_action().
        validations: Named hooks run through execute_validation().
    """

    template_name: str
    selectors: dict[str, str] = field(default_factory=dict)
    actions: dict[str, TemplateHook] = field(default_factory=dict)
    validations: dict[str, TemplateHook] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._check_hooks("action", self.actions)
        self._check_hooks("validation", self.validations)

    def _check_hooks(self, kind: str, hooks: Mapping[str, Any]) -> None:
        for name, hook in hooks.items():
            if not callable(hook):
                raise ConfigurationError(
                    f"{kind.capitalize()} '{name}' in template '{self.template_name}' is not callable"
                )


class BaseTemplate(BasePage):
    """
    Base class for form, list and modal templates.

    Attributes:
        config: Template configuration.
        template_elements: Locators bound from ``config.selectors``.
    """

    def __init__(self, page: Page, config: TemplateConfig):
        super().__init__(page)
        self.config = config
        self.template_elements: dict[str, Locator] = {}
        self.initialize_elements()

    @property
    def template_name(self) -> str:
        return self.config.template_name

    def initialize_elements(self) -> None:
        """Bind every configured selector to a lazy locator."""
        for element_name, selector in self.config.selectors.items():
            self.template_elements[element_name] = self.page.locator(selector)

    def get_element(self, element_name: str) -> Locator:
        """
        Get a bound element by name.

        Raises:
            NotFoundError: If the name was not in the selector map.
        """
        try:
            return self.template_elements[element_name]
        except KeyError:
            raise NotFoundError(
                f"Element '{element_name}' not found in template '{self.template_name}'"
            ) from None

    def execute_action(self, action_name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Run a configured action hook.

        Raises:
            NotFoundError: If no action with that name is configured.
        """
        action = self.config.actions.get(action_name)
        if action is None:
            raise NotFoundError(
                f"Action '{action_name}' not found in template '{self.template_name}'"
            )
        logger.debug(f"Executing action '{action_name}' on {self.template_name}")
        return action(self, *args, **kwargs)

    def execute_validation(self, validation_name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Run a configured validation hook.

        Raises:
            NotFoundError: If no validation with that name is configured.
        """
        validation = self.config.validations.get(validation_name)
        if validation is None:
            raise NotFoundError(
                f"Validation '{validation_name}' not found in template '{self.template_name}'"
            )
        logger.debug(f"Executing validation '{validation_name}' on {self.template_name}")
        return validation(self, *args, **kwargs)

    def take_template_screenshot(self, step_name: str) -> Path | None:
        """Take a screenshot named ``<template_name>-<step_name>``."""
        return self.take_screenshot(f"{self.template_name}-{step_name}")
