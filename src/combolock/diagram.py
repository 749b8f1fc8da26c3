import logging
import textwrap
import time
import webbrowser
from string import Template
from tempfile import NamedTemporaryFile
from typing import Optional

from .machine import LockStateMachine
from .state import INITIAL_STATE
from .state import LockState

logger = logging.getLogger(__name__)

HTML_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
  <script type="module">
    import mermaid from 'https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.esm.min.mjs';
    mermaid.initialize({ startOnLoad: true });
  </script>
</head>
<body>
  <div class="mermaid">
    ---
    title: $name
    ---
    stateDiagram-v2
$diagram
  </div>
</body>
</html>
"""

_DRAWINGS = {
    LockState.OPEN_UNLOCKED: r"""
         ________
        |  ____  |
        | |    | |
        |_|    | |
         ______|_|
        |   __   |
        |  [  ]  | OPEN
        |   []   | UNLOCKED
        |   []   |
         \______/""",
    LockState.CLOSED_UNLOCKED: r"""
         ________
        |  ____  |
        |_|____|_|
        |   __   |
        |  [  ]  | CLOSED
        |   []   | UNLOCKED
        |   []   |
         \______/""",
    LockState.CLOSED_LOCKED: r"""
         ________
        |  ____  |
        |_|____|_|
        |   __   |
        |  [**]  | CLOSED
        |   []   | LOCKED
        |   []   |
         \______/""",
}

OVERVIEW = r"""
   ______________                ________________                 ________
  |              | -- CLOSE --> |                | --- LOCK ---> |        |
  | UnlockedOpen |              | UnlockedClosed |               | Locked |
  |______________| <-- OPEN --- |________________| <-- UNLOCK -- |________|
"""


def draw(state: LockState) -> str:
    """ASCII drawing of a lock in the given state."""
    return _DRAWINGS[state].lstrip("\n")


def show_state_diagram(
    machine: LockStateMachine, name: Optional[str] = None, delay: float = 3.0
):
    """Render and open state diagram on a web browser.

    Creates a state diagram of the provided state machine, wraps the
    diagram as a HTML page and opens it with the default web browser.

    The page is written to a temporary file that is deleted on return, so
    the call blocks for `delay` seconds to let the browser load it. The
    interactive driver passes a shorter delay.
    """
    name = machine.__class__.__name__ if name is None else name

    logger.debug("Create state diagram: %s", name)

    state_diagram = create_state_diagram(machine)
    logger.debug(state_diagram)

    html = _create_html_page_with_state_diagram(name, state_diagram)

    _open_with_web_browser(html, delay=delay)


def create_state_diagram(machine: LockStateMachine) -> str:
    """Create a text based representation of the given state machine.

    This implementation uses Mermaid to render the state diagram.
    Only accepting transitions are drawn; rejected events leave the
    state unchanged and would only add noise.

    See also https://mermaid.js.org/syntax/stateDiagram.html.
    """
    state_names_by_ids = {_get_id(s): s.label for s in LockState}
    transitions = [f"[*] --> {_get_id(INITIAL_STATE)}"]

    for t in machine.transitions():
        to_state_id = _get_id(t.to_state)

        for from_state in t.from_states:
            line = f"{_get_id(from_state)} --> {to_state_id} : {t.name}"

            if t.guard:
                line += " [guarded]"

            transitions.append(line)

    state_definitions = [f"{id}: {name}" for id, name in state_names_by_ids.items()]
    return "\n".join(state_definitions + [""] + transitions)


def _get_id(state: LockState) -> str:
    """Get state id."""
    return state.value.lower()


def _create_html_page_with_state_diagram(
    name: str, diagram: str, template: str = HTML_TEMPLATE
):
    """Create a HTML page with given state diagram."""
    indented_text = textwrap.indent(diagram, " " * 6)
    return Template(template).safe_substitute(name=name, diagram=indented_text)


def _open_with_web_browser(
    content: str, suffix: str = ".html", delete: bool = True, delay: float = 3.0
):
    """Write content to a temp file and open it with default web browser.

    The temporary file gets deleted by default. Use `delete=False` to preserve the file.
    """
    with NamedTemporaryFile(
        delete=delete, suffix=suffix, mode="w", encoding="utf-8"
    ) as fh:
        fh.write(content)
        fh.flush()

        logger.debug("State diagram written to %s.", fh.name)

        _open_web_page(fh.name)

        # Give the web browser time to read the page before the file is deleted.
        time.sleep(delay if delete else 0.0)


def _open_web_page(filename: str):
    """Open a file on a web browser."""
    webbrowser.open(f"file:///{filename}")
