"""
Reusable modal/dialog template.

Lifecycle: Closed -> Open -> (confirmed | cancelled | closed by button,
overlay or Escape) -> Closed. Opening is observed as the modal becoming
visible; closing as the modal being detached from the DOM.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from playwright.sync_api import Page

from pages.templates.base_template import BaseTemplate, TemplateConfig
from pages.templates.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class ModalTemplateConfig(TemplateConfig):
    modal_selector: str
    title_selector: str | None = None
    content_selector: str | None = None
    close_button_selector: str | None = None
    confirm_button_selector: str | None = None
    cancel_button_selector: str | None = None
    overlay_selector: str | None = None


# Semantic button names accepted by verify_buttons()
BUTTON_ALIASES = {
    "close": "close_button_selector",
    "confirm": "confirm_button_selector",
    "ok": "confirm_button_selector",
    "yes": "confirm_button_selector",
    "cancel": "cancel_button_selector",
    "no": "cancel_button_selector",
}


class ModalTemplate(BaseTemplate):
    """Open/close lifecycle and content assertions for an overlay."""

    config: ModalTemplateConfig

    def __init__(self, page: Page, config: ModalTemplateConfig):
        super().__init__(page, config)

    def _require(self, attribute: str, label: str) -> str:
        selector = getattr(self.config, attribute)
        if not selector:
            raise ConfigurationError(
                f"{label} selector ({attribute}) not configured for modal template '{self.template_name}'"
            )
        return selector

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def wait_for_modal(self, timeout: int | None = None) -> None:
        """Wait for the modal to become visible."""
        modal = self.page.locator(self.config.modal_selector)
        if timeout is None:
            timeout = self.settings.MODAL_TIMEOUT_MS
        self.wait_for_element(modal, timeout)
        self.take_template_screenshot("modal-opened")
        logger.info(f"Modal opened: {self.template_name}")

    def wait_for_modal_close(self, timeout: int | None = None) -> None:
        """Wait for the modal to be removed from the DOM."""
        modal = self.page.locator(self.config.modal_selector)
        if timeout is None:
            timeout = self.settings.MODAL_TIMEOUT_MS
        modal.wait_for(state="detached", timeout=timeout)
        self.take_template_screenshot("modal-closed")
        logger.info(f"Modal closed: {self.template_name}")

    def is_modal_visible(self) -> bool:
        return self.page.locator(self.config.modal_selector).is_visible()

    def close_modal(self) -> None:
        """Click the close button and wait for the modal to go away."""
        selector = self._require("close_button_selector", "Close button")

        self.take_template_screenshot("before-close")
        close_button = self.page.locator(selector)
        self.wait_for_element(close_button)
        close_button.click()
        self.wait_for_modal_close()
        logger.info("Modal closed using close button")

    def confirm_modal(self) -> None:
        """
        Click the confirm button.

        Confirming does not always dismiss a dialog (it may advance to
        another step), so closure is not awaited here.
        """
        selector = self._require("confirm_button_selector", "Confirm button")

        self.take_template_screenshot("before-confirm")
        confirm_button = self.page.locator(selector)
        self.wait_for_element(confirm_button)
        confirm_button.click()
        logger.info("Modal confirmed")

    def cancel_modal(self) -> None:
        selector = self._require("cancel_button_selector", "Cancel button")

        self.take_template_screenshot("before-cancel")
        cancel_button = self.page.locator(selector)
        self.wait_for_element(cancel_button)
        cancel_button.click()
        self.wait_for_modal_close()
        logger.info("Modal cancelled")

    def close_by_overlay(self) -> None:
        selector = self._require("overlay_selector", "Overlay")

        self.take_template_screenshot("before-overlay-close")
        self.page.locator(selector).click()
        self.wait_for_modal_close()
        logger.info("Modal closed by clicking overlay")

    def close_by_escape(self) -> None:
        self.take_template_screenshot("before-escape-close")
        self.page.keyboard.press("Escape")
        self.wait_for_modal_close()
        logger.info("Modal closed using Escape key")

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def get_modal_title(self) -> str:
        selector = self._require("title_selector", "Title")
        title = (self.page.locator(selector).text_content() or "").strip()
        logger.info(f"Modal title: {title}")
        return title

    def get_modal_content(self) -> str:
        selector = self._require("content_selector", "Content")
        content = (self.page.locator(selector).text_content() or "").strip()
        logger.info(f"Modal content: {content[:100]}...")
        return content

    def verify_title(self, expected_title: str) -> None:
        actual_title = self.get_modal_title()
        assert actual_title == expected_title, (
            f"Expected modal title '{expected_title}', but found '{actual_title}'"
        )
        logger.info(f"Modal title verified: {expected_title}")

    def verify_content_contains(self, expected_text: str) -> None:
        actual_content = self.get_modal_content()
        assert expected_text in actual_content, (
            f"Expected modal content to contain '{expected_text}'"
        )
        logger.info(f"Modal content verified to contain: {expected_text}")

    def verify_buttons(self, buttons: Iterable[str]) -> None:
        """
        Assert the named buttons are visible.

        Accepts close, confirm/ok/yes and cancel/no. Names that do not map
        to a configured selector are skipped.
        """
        for button in buttons:
            attribute = BUTTON_ALIASES.get(button.lower())
            selector = getattr(self.config, attribute) if attribute else None
            if not selector:
                logger.debug(f"Skipping '{button}' button: no selector configured")
                continue
            self.verify_element_visible(self.page.locator(selector))
            logger.info(f"{button} button is present")

        self.take_template_screenshot("buttons-verified")


# -----------------------------------------------------------------------------
# Built-in Configurations
# -----------------------------------------------------------------------------

def confirmation_modal_template() -> ModalTemplateConfig:
    return ModalTemplateConfig(
        template_name="confirmation-modal",
        selectors={
            "modal": '.modal, .dialog, [role="dialog"]',
            "title": ".modal-title, .dialog-title, h2, h3",
            "content": ".modal-body, .dialog-content, .modal-content p",
            "closeButton": '.modal-close, .close, [aria-label="Close"]',
            "confirmButton": ".btn-confirm, .btn-primary, .btn-yes, .confirm",
            "cancelButton": ".btn-cancel, .btn-secondary, .btn-no, .cancel",
            "overlay": ".modal-backdrop, .overlay, .modal-overlay",
        },
        modal_selector='.modal, .dialog, [role="dialog"]',
        title_selector=".modal-title, .dialog-title, h2, h3",
        content_selector=".modal-body, .dialog-content, .modal-content p",
        close_button_selector='.modal-close, .close, [aria-label="Close"]',
        confirm_button_selector=".btn-confirm, .btn-primary, .btn-yes, .confirm",
        cancel_button_selector=".btn-cancel, .btn-secondary, .btn-no, .cancel",
        overlay_selector=".modal-backdrop, .overlay, .modal-overlay",
    )


def alert_modal_template() -> ModalTemplateConfig:
    """Transient alert/toast notification; dismissible only via its close button."""
    return ModalTemplateConfig(
        template_name="alert-modal",
        selectors={
            "modal": ".alert-modal, .notification, .toast",
            "title": ".alert-title, .notification-title",
            "content": ".alert-message, .notification-content",
            "closeButton": ".alert-close, .notification-close",
        },
        modal_selector=".alert-modal, .notification, .toast",
        title_selector=".alert-title, .notification-title",
        content_selector=".alert-message, .notification-content",
        close_button_selector=".alert-close, .notification-close",
    )
