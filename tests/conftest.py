import pytest

from hack_machine import HackMachine


@pytest.fixture
def machine():
    m = HackMachine()
    m["SP"] = 256
    m["LCL"] = 300
    m["ARG"] = 400
    m["THIS"] = 3000
    m["THAT"] = 3010
    return m
