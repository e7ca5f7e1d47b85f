from icsim.app.commands import card, mynumber, reader, state

COMMAND_MODULES = [reader, card, mynumber, state]
