from combolock import LockStateMachine
from combolock.diagram import create_state_diagram, show_state_diagram

machine = LockStateMachine()

# Mermaid source of the state diagram.
print(create_state_diagram(machine))

# Shows the state diagram on default web browser.
show_state_diagram(machine)
