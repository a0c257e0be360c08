"""NiceGUI chat interface for the Lexora relay."""

from nicegui import app, ui

from lexora.api.config import get_server_config
from lexora.ui.client import ChatClient
from lexora.ui.state import ChatState, Message
from lexora.ui.theme import StorageThemeRepository, ThemeController

PREFERS_DARK_JS = "window.matchMedia('(prefers-color-scheme: dark)').matches"

# Vue modifiers: plain Enter sends, Shift+Enter falls through to a newline.
SEND_ON_ENTER = "keydown.enter.exact.prevent"

CUSTOM_CSS = """
<style>
    body { background: linear-gradient(135deg, #f8fafc 0%, #eff6ff 100%); min-height: 100vh; }
    body.body--dark { background: linear-gradient(135deg, #111827 0%, #0f172a 50%, #1f2937 100%); }

    .app-container {
        background: rgba(255, 255, 255, 0.8);
        border: 1px solid #e2e8f0;
        border-radius: 16px;
        box-shadow: 0 10px 25px rgba(0, 0, 0, 0.08);
        overflow: hidden;
    }
    .body--dark .app-container {
        background: rgba(31, 41, 55, 0.8);
        border-color: #374151;
    }

    .muted { color: #475569; }
    .body--dark .muted { color: #9ca3af; }

    .message-user {
        background: linear-gradient(135deg, #2563eb 0%, #1d4ed8 100%);
        color: white;
        border-radius: 16px 16px 4px 16px;
    }
    .message-assistant {
        background: rgba(255, 255, 255, 0.9);
        border: 1px solid #e2e8f0;
        color: #1e293b;
        border-radius: 16px 16px 16px 4px;
    }
    .body--dark .message-assistant {
        background: rgba(55, 65, 81, 0.8);
        border-color: #4b5563;
        color: #f3f4f6;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #94a3b8;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.1s; }
    .typing-dot:nth-child(3) { animation-delay: 0.2s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


@ui.page("/")
async def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    dark_mode = ui.dark_mode()
    theme_btn: ui.button

    def apply_theme(dark: bool) -> None:
        dark_mode.set_value(dark)
        theme_btn.props(f"icon={'light_mode' if dark else 'dark_mode'}")

    theme = ThemeController(StorageThemeRepository(app.storage.user), on_change=apply_theme)
    client = ChatClient()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    counter_label: ui.label
    input_field: ui.textarea
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role == "user"
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes(f"max-w-[70%] gap-1 px-4 py-3 {bubble}"):
                ui.label("You" if is_user else "Assistant").classes(
                    "text-xs font-medium opacity-70"
                )
                ui.label(msg.text).classes("text-sm leading-relaxed whitespace-pre-wrap")

    def render_thinking() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.column().classes("gap-1 px-4 py-3 message-assistant"):
                ui.label("Assistant").classes("text-xs font-medium opacity-70")
                with ui.row().classes("items-center gap-2"):
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    ui.label("thinking").classes("text-sm muted")

    def update_controls() -> None:
        input_field.set_enabled(not state.pending)
        send_btn.set_enabled(state.can_submit(input_field.value))
        if state.pending:
            send_btn.props("loading")
        else:
            send_btn.props(remove="loading")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not state.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-2"):
                    ui.icon("forum").classes("text-5xl muted")
                    ui.label("Start the conversation…").classes("text-lg muted")
                    ui.label("Ask me anything!").classes("text-sm muted")
            for msg in state.messages:
                render_message(msg)
            if state.pending:
                render_thinking()
        counter_label.set_text(f"{len(state.messages)} messages")
        update_controls()
        scroll_area.scroll_to(percent=1.0)

    state = ChatState(client.send, on_change=refresh_messages)

    async def send_message() -> None:
        text = input_field.value
        if not state.can_submit(text):
            return
        input_field.value = ""
        await state.submit(text)
        if state.last_error:
            ui.notify(state.last_error, type="negative")

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-4xl mx-auto gap-6"),
    ):
        # Header
        with ui.column().classes("w-full items-center gap-2"):
            with ui.row().classes("items-center gap-4"):
                ui.label("Lexora Chatbot").classes("text-4xl font-bold")
                theme_btn = ui.button(on_click=theme.toggle).props("flat round")
            ui.label("Intelligent conversations powered by AI").classes("text-lg muted")

        with ui.column().classes("w-full app-container gap-0"):
            # Messages
            with (
                ui.scroll_area().classes("w-full h-96") as scroll_area,
                ui.column().classes("w-full p-6"),
            ):
                messages_container = ui.column().classes("w-full gap-4")

            # Input
            with ui.column().classes("w-full p-4 gap-2 border-t"):
                with ui.row().classes("w-full gap-3 items-end no-wrap"):
                    input_field = (
                        ui.textarea(
                            placeholder=(
                                "Type your message here... "
                                "(Press Enter to send, Shift+Enter for new line)"
                            ),
                            on_change=lambda _: update_controls(),
                        )
                        .props("outlined autogrow rows=2")
                        .classes("flex-grow")
                        .mark("message-input")
                        .on(SEND_ON_ENTER, send_message)
                    )
                    send_btn = (
                        ui.button("Send", icon="send", on_click=send_message)
                        .props("unelevated color=primary")
                        .mark("send-button")
                    )
                with ui.row().classes("w-full justify-between text-xs muted"):
                    ui.label("Press Enter to send • Shift+Enter for new line")
                    counter_label = ui.label().mark("message-counter")

        ui.label("Powered by Mistral AI via Ollama").classes("w-full text-center text-sm muted")

    apply_theme(theme.dark)
    refresh_messages()

    await ui.context.client.connected()
    prefers_dark = await ui.run_javascript(PREFERS_DARK_JS)
    theme.adopt_os_preference(bool(prefers_dark))


def main() -> None:
    config = get_server_config()
    ui.run(
        title="Lexora",
        host=config.host,
        port=config.ui_port,
        favicon="🤖",
        storage_secret=config.storage_secret,
        reload=False,
    )


if __name__ == "__main__":
    main()
