from rich.console import Console
from rich.theme import Theme

theme = Theme({
    "prompt": "bold blue",
    "error": "red bold",
})

console = Console(theme=theme)
