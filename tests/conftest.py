from pytest import fixture

from pocketcalc.machine import Machine


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def press(machine: Machine):
    '''
    Press every key of a string in turn, and return what the display reads.

    Spaces are only for readability.
    '''
    def pressing(keys: str) -> str:
        for key in keys.replace(' ', ''):
            machine.press(key)
        return machine.read_display()
    return pressing
