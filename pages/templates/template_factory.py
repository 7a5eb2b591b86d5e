"""
Template registry, factory and per-test manager.

The registry is an explicit value rather than global state: each test
session builds its own (usually through a fixture), so registrations made
by one test cannot leak into another.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from playwright.sync_api import Page

from pages.templates.errors import TemplateNotFoundError
from pages.templates.form_template import (
    FormOutcome,
    FormTemplate,
    FormTemplateConfig,
    initial_signup_form_template,
    login_form_template,
    signup_form_template,
)
from pages.templates.list_template import ListTemplate, ListTemplateConfig, products_list_template
from pages.templates.modal_template import (
    ModalTemplate,
    ModalTemplateConfig,
    alert_modal_template,
    confirmation_modal_template,
)

logger = logging.getLogger(__name__)

AnyTemplateConfig = FormTemplateConfig | ListTemplateConfig | ModalTemplateConfig
AnyTemplate = FormTemplate | ListTemplate | ModalTemplate


class TemplateType(str, Enum):
    """Enumeration of template kinds held by a registry."""

    FORM = "form"
    LIST = "list"
    MODAL = "modal"


@dataclass
class TemplateRegistry:
    """Template name to configuration, one mapping per template type."""

    form: dict[str, FormTemplateConfig] = field(default_factory=dict)
    list: dict[str, ListTemplateConfig] = field(default_factory=dict)
    modal: dict[str, ModalTemplateConfig] = field(default_factory=dict)

    def bucket(self, template_type: TemplateType | str) -> dict[str, Any]:
        return getattr(self, TemplateType(template_type).value)


def build_default_registry() -> TemplateRegistry:
    """Return a new registry holding the built-in storefront templates."""
    return TemplateRegistry(
        form={
            "signup": signup_form_template(),
            "login": login_form_template(),
            "initial-signup": initial_signup_form_template(),
        },
        list={
            "products": products_list_template(),
        },
        modal={
            "confirmation": confirmation_modal_template(),
            "alert": alert_modal_template(),
        },
    )


class TemplateFactory:
    """
    Create template instances from named configurations.

    Attributes:
        registry: The configurations this factory resolves names against.
    """

    def __init__(self, registry: TemplateRegistry | None = None):
        self.registry = registry if registry is not None else build_default_registry()

    def _lookup(self, template_type: TemplateType, name: str) -> Any:
        bucket = self.registry.bucket(template_type)
        try:
            return bucket[name]
        except KeyError:
            raise TemplateNotFoundError(template_type.value, name, list(bucket)) from None

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    def create_form_template(self, page: Page, template_name: str) -> FormTemplate:
        return FormTemplate(page, self._lookup(TemplateType.FORM, template_name))

    def create_list_template(self, page: Page, template_name: str) -> ListTemplate:
        return ListTemplate(page, self._lookup(TemplateType.LIST, template_name))

    def create_modal_template(self, page: Page, template_name: str) -> ModalTemplate:
        return ModalTemplate(page, self._lookup(TemplateType.MODAL, template_name))

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_form_template(self, name: str, config: FormTemplateConfig) -> None:
        self.registry.form[name] = config
        logger.info(f"Registered form template: {name}")

    def register_list_template(self, name: str, config: ListTemplateConfig) -> None:
        self.registry.list[name] = config
        logger.info(f"Registered list template: {name}")

    def register_modal_template(self, name: str, config: ModalTemplateConfig) -> None:
        self.registry.modal[name] = config
        logger.info(f"Registered modal template: {name}")

    def unregister_template(self, template_type: TemplateType | str, name: str) -> bool:
        """
        Remove a template from the registry.

        Returns:
            True if the template existed and was removed.
        """
        bucket = self.registry.bucket(template_type)
        if name not in bucket:
            return False
        del bucket[name]
        logger.info(f"Unregistered {TemplateType(template_type).value} template: {name}")
        return True

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def has_template(self, template_type: TemplateType | str, name: str) -> bool:
        return name in self.registry.bucket(template_type)

    def get_available_templates(
        self, template_type: TemplateType | str | None = None
    ) -> list[str] | dict[str, list[str]]:
        """
        List registered template names.

        Returns:
            Names for one type when template_type is given, otherwise a
            mapping of every type to its names.
        """
        if template_type is not None:
            return list(self.registry.bucket(template_type))
        return {t.value: list(self.registry.bucket(t)) for t in TemplateType}

    def get_template_config(self, template_type: TemplateType | str, name: str) -> AnyTemplateConfig:
        """Return a registered configuration without instantiating a template."""
        return self._lookup(TemplateType(template_type), name)


class TemplateManager:
    """
    Per-test cache of template instances bound to one page.

    Instances are keyed by ``"<type>-<name>"`` and created through the
    factory on first request.
    """

    def __init__(self, page: Page, factory: TemplateFactory | None = None):
        self.page = page
        self.factory = factory if factory is not None else TemplateFactory()
        self.active_templates: dict[str, AnyTemplate] = {}

    def get_form_template(self, template_name: str) -> FormTemplate:
        key = f"{TemplateType.FORM.value}-{template_name}"
        if key not in self.active_templates:
            self.active_templates[key] = self.factory.create_form_template(self.page, template_name)
        return self.active_templates[key]

    def get_list_template(self, template_name: str) -> ListTemplate:
        key = f"{TemplateType.LIST.value}-{template_name}"
        if key not in self.active_templates:
            self.active_templates[key] = self.factory.create_list_template(self.page, template_name)
        return self.active_templates[key]

    def get_modal_template(self, template_name: str) -> ModalTemplate:
        key = f"{TemplateType.MODAL.value}-{template_name}"
        if key not in self.active_templates:
            self.active_templates[key] = self.factory.create_modal_template(self.page, template_name)
        return self.active_templates[key]

    def execute_form_template(
        self,
        template_name: str,
        form_data: Mapping[str, Any],
        expected_outcome: FormOutcome = "success",
    ) -> FormTemplate:
        """Fill and submit a form template in one call."""
        form = self.get_form_template(template_name)
        form.fill_form(form_data)
        form.submit_form(expected_outcome)
        return form

    def clear_all_templates(self) -> None:
        """Drop cached instances; the factory's registry is untouched."""
        self.active_templates.clear()
        logger.info("Cleared all active templates")

    def get_active_template_count(self) -> int:
        return len(self.active_templates)

    def get_active_template_keys(self) -> list[str]:
        return list(self.active_templates)
