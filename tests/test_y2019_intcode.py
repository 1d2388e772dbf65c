import pytest

from aocsolve.y2019.intcode import Computer, parse_intcode, quick_run


@pytest.mark.parametrize(
    "program, expected",
    [
        ("1,0,0,0,99", "2,0,0,0,99"),
        ("2,3,0,3,99", "2,3,0,6,99"),
        ("2,4,4,5,99,0", "2,4,4,5,99,9801"),
        ("1,1,1,4,99,5,6,0,99", "30,1,1,4,2,5,6,0,99"),
        ("1002,4,3,4,33", "1002,4,3,4,99"),
    ],
)
def test_memory_after_run(program, expected):
    comp = Computer(parse_intcode(program))
    comp.run()
    memory = ",".join(str(comp.code[i]) for i in range(len(comp.code)))
    assert memory == expected


@pytest.mark.parametrize(
    "program, value, expected",
    [
        ("3,9,8,9,10,9,4,9,99,-1,8", 8, 1),
        ("3,9,8,9,10,9,4,9,99,-1,8", 11, 0),
        ("3,3,1108,-1,8,3,4,3,99", 8, 1),
        ("3,3,1108,-1,8,3,4,3,99", 11, 0),
        ("3,12,6,12,15,1,13,14,13,4,13,99,-1,0,1,9", 0, 0),
        ("3,12,6,12,15,1,13,14,13,4,13,99,-1,0,1,9", 999, 1),
        ("3,3,1105,-1,9,1101,0,0,12,4,12,99,1", 0, 0),
        ("3,3,1105,-1,9,1101,0,0,12,4,12,99,1", 999, 1),
        ("104,1125899906842624,99", 0, 1125899906842624),
    ],
)
def test_io(program, value, expected):
    comp = Computer(parse_intcode(program), [value])
    comp.run()
    assert comp.outputs[0] == expected


def test_waits_for_input_then_resumes():
    comp = Computer(parse_intcode("3,0,4,0,99"))
    assert comp.run() is False
    assert comp.outputs == []
    comp.inputs.append(21)
    assert comp.run() is True
    assert comp.outputs == [21]


def test_unknown_opcode():
    with pytest.raises(ValueError, match="Unknown op"):
        Computer(parse_intcode("77,0,0,0")).run()


def test_parse_intcode():
    assert parse_intcode("1,-2,3") == {0: 1, 1: -2, 2: 3}


def test_quick_run_leaves_code_untouched():
    code = parse_intcode("1,0,0,0,99")
    quick_run(code, [])
    assert code == parse_intcode("1,0,0,0,99")
    assert quick_run(parse_intcode("3,0,4,0,99"), [13]) == [13]