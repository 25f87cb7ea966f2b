from rich.console import Console
from rich.text import Text

console = Console()

LOGO = r"""
__        __   _     _                 _
\ \      / /__| |__ | |__   ___   ___ | | __
 \ \ /\ / / _ \ '_ \| '_ \ / _ \ / _ \| |/ /
  \ V  V /  __/ |_) | | | | (_) | (_) |   <
   \_/\_/ \___|_.__/|_| |_|\___/ \___/|_|\_\ """

COLORS = ['magenta', 'cyan', 'green', 'yellow', 'blue']


def show_logo(text: str, version: str | None = None) -> None:
    for index, line in enumerate(line for line in text.splitlines() if line.strip()):
        console.print(Text(line, style=COLORS[index % len(COLORS)]))

    tagline = Text('Webhook Client', style='bold magenta')
    if version:
        tagline.append(f' • {version}', style='cyan')
    console.print(tagline)
    console.print()
