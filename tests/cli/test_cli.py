import pytest
from atomtk.cli import main


def test_perceive(capsys):
    main(['perceive', 'C=C=C allene'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'allene'
    assert lines[1].split() == ['C1', 'C.sp2']
    assert lines[2].split() == ['C2', 'C.sp']
    assert lines[4].split() == ['H4', '-']

    main(['perceive', 'C[Hg]C'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[2].split() == ['Hg2', '-']
    assert lines[3].split() == ['C3', 'C.sp3']


def test_descriptor(capsys):
    main(['descriptor', 'CO methanol', '--precision', '2'])
    out = capsys.readouterr().out
    assert out.startswith('methanol')
    assert 'KierHallElectronegativity' in out
    assert 'AtomHybridization' in out


def test_no_command():
    with pytest.raises(SystemExit):
        main([])
