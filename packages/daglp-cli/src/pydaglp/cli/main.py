import typer
from pydaglp.common.messaging import bus

from .commands import longest
from .rendering import TyperRenderer

# --- Global Setup ---
# Inject the CLI-specific renderer into the common message bus instance.
bus.set_renderer(TyperRenderer())

# --- App Definition ---
app = typer.Typer(
    add_completion=False,
    name="daglp",
    help="daglp: 在拓扑有序的提交历史中找出最长的祖先链。",
)

# --- Command Registration ---
longest.register(app)

# --- Entry Point ---
if __name__ == "__main__":
    app()
