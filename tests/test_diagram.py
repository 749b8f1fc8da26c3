from combolock import LockState
from combolock import LockStateMachine
from combolock import diagram
from combolock.diagram import create_state_diagram
from combolock.diagram import draw


def test_state_diagram():
    text = create_state_diagram(LockStateMachine())

    assert "openunlocked: Unlocked and Open" in text
    assert "closedunlocked: Unlocked and Closed" in text
    assert "closedlocked: Locked" in text
    assert "[*] --> openunlocked" in text


def test_every_transition_drawn():
    machine = LockStateMachine()
    text = create_state_diagram(machine)

    for t in machine.transitions():
        for from_state in t.from_states:
            assert f"{from_state.value.lower()} --> {t.to_state.value.lower()} : {t.name}" in text

    assert "closedlocked --> closedunlocked : unlock [guarded]" in text
    assert "openunlocked --> openunlocked : set" in text


def test_html_page():
    html = diagram._create_html_page_with_state_diagram("Lock", "a --> b")

    assert "title: Lock" in html
    assert "      a --> b" in html


def test_show_state_diagram(monkeypatch):
    opened = []
    monkeypatch.setattr(
        diagram,
        "_open_with_web_browser",
        lambda html, delay: opened.append((html, delay)),
    )

    diagram.show_state_diagram(LockStateMachine(), delay=0.5)

    html, delay = opened[0]
    assert "title: LockStateMachine" in html
    assert "stateDiagram-v2" in html
    assert delay == 0.5


def test_browser_delay(monkeypatch):
    pages = []
    sleeps = []
    monkeypatch.setattr(diagram, "_open_web_page", pages.append)
    monkeypatch.setattr(diagram.time, "sleep", sleeps.append)

    diagram._open_with_web_browser("<html></html>", delay=0.25)
    diagram._open_with_web_browser("<html></html>", delete=False, delay=0.25)

    assert len(pages) == 2
    assert sleeps == [0.25, 0.0]


def test_draw():
    assert "OPEN" in draw(LockState.OPEN_UNLOCKED)
    assert "UNLOCKED" in draw(LockState.CLOSED_UNLOCKED)
    assert "[**]" in draw(LockState.CLOSED_LOCKED)
    assert not draw(LockState.CLOSED_LOCKED).startswith("\n")
