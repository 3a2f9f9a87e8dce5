"""Modal screens for the TUI.

This module hides the design decisions about:
- Settings dialog appearance (CSS, layout)
- How provider and model choices are presented
- Keyboard shortcuts for dialogs

The dialog edits a draft; nothing is applied unless the user saves.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from ..llm.catalog import PROVIDERS, get_provider_info, provider_display_name
from ..settings import Settings
from .config import API_KEY_HELP_TEMPLATE, API_KEY_PLACEHOLDER, SETTINGS_TITLE


def _model_options(provider_id: str) -> list[tuple[str, str]]:
    info = get_provider_info(provider_id)
    if info is None:
        return []
    return [(model, model) for model in info.models]


class SettingsScreen(ModalScreen[Settings | None]):
    """Provider, model and API key form.

    Dismisses with the edited Settings on save, or None on cancel.
    Choosing another provider resets the model to that provider's first
    model.
    """

    CSS = """
    SettingsScreen {
        align: center middle;
        background: $background 70%;
    }

    #settings-dialog {
        width: 64;
        height: auto;
        border: tall $primary;
        background: $surface;
        padding: 1 2;
    }

    #settings-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #settings-dialog Label {
        margin-top: 1;
    }

    #api-key-help {
        color: $text-muted;
    }

    #settings-buttons {
        width: 100%;
        height: 3;
        align: right middle;
        margin-top: 1;
    }

    #settings-buttons Button {
        margin-left: 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._initial = settings
        self._provider_id = settings.provider_id

    def compose(self) -> ComposeResult:
        settings = self._initial
        known_provider = get_provider_info(settings.provider_id) is not None
        models = _model_options(settings.provider_id)
        model_ids = [value for _, value in models]

        if settings.model_id in model_ids:
            model_value = settings.model_id
        elif model_ids:
            model_value = model_ids[0]
        else:
            model_value = Select.NULL

        with Vertical(id="settings-dialog"):
            yield Static(SETTINGS_TITLE, id="settings-title")

            yield Label("AI provider")
            yield Select(
                [(provider.name, provider.id) for provider in PROVIDERS],
                value=settings.provider_id if known_provider else Select.NULL,
                id="provider-select",
            )

            yield Label("Model")
            yield Select(models, value=model_value, id="model-select")

            yield Label("API key")
            yield Input(
                value=settings.api_key,
                password=True,
                placeholder=API_KEY_PLACEHOLDER,
                id="api-key-input",
            )
            yield Static(self._help_text(), id="api-key-help")

            with Horizontal(id="settings-buttons"):
                yield Button("Cancel", id="cancel-btn", variant="default")
                yield Button("Save", id="save-btn", variant="primary")

    def _help_text(self) -> str:
        return API_KEY_HELP_TEMPLATE.format(provider=provider_display_name(self._provider_id))

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "provider-select":
            return
        event.stop()
        if event.value is Select.NULL or event.value == self._provider_id:
            return

        self._provider_id = str(event.value)
        model_select = self.query_one("#model-select", Select)
        options = _model_options(self._provider_id)
        model_select.set_options(options)
        if options:
            model_select.value = options[0][1]
        self.query_one("#api-key-help", Static).update(self._help_text())

    def collect(self) -> Settings:
        """Build settings from the current form values."""
        model_value = self.query_one("#model-select", Select).value
        draft = self._initial
        if self._provider_id != draft.provider_id:
            draft = draft.with_provider(self._provider_id)
        if model_value is not Select.NULL:
            draft = draft.model_copy(update={"model_id": str(model_value)})
        api_key = self.query_one("#api-key-input", Input).value
        return draft.model_copy(update={"api_key": api_key})

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save-btn":
            self.dismiss(self.collect())
        elif event.button.id == "cancel-btn":
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
