from vmtranslator.cli import main, script_name_for


def write_vm(tmp_path, name, text):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_writes_asm_next_to_input(tmp_path, capsys):
    src = write_vm(tmp_path, "Simple.vm", "push constant 7\npush constant 8\nadd\n")
    assert main([str(src)]) == 0
    out = (tmp_path / "Simple.asm").read_text(encoding="utf-8")
    assert out.startswith("// Performing constant push\n@7\nD=A\n")
    assert "asm_written=" in capsys.readouterr().out


def test_static_symbols_use_file_stem(tmp_path):
    src = write_vm(tmp_path, "Counter.vm", "push static 4\n")
    dst = tmp_path / "out" / "c.asm"
    assert main([str(src), "-o", str(dst)]) == 0
    assert "@Counter.4" in dst.read_text(encoding="utf-8").splitlines()


def test_script_name_override(tmp_path):
    src = write_vm(tmp_path, "Counter.vm", "pop static 1\n")
    assert main([str(src), "--script-name", "Ctr"]) == 0
    assert "@Ctr.1" in (tmp_path / "Counter.asm").read_text(encoding="utf-8")


def test_errors_write_nothing(tmp_path, capsys):
    src = write_vm(tmp_path, "Bad.vm", "push constant 1\npop constant 2\nfrobnicate\n")
    assert main([str(src)]) == 2
    assert not (tmp_path / "Bad.asm").exists()
    err = capsys.readouterr().err
    assert "line=2" in err
    assert "line=3" in err


def test_static_reject_flag(tmp_path):
    src = write_vm(tmp_path, "S.vm", "push static 0\n")
    assert main([str(src), "--static", "reject"]) == 2
    assert not (tmp_path / "S.asm").exists()


def test_empty_program_writes_nothing(tmp_path):
    src = write_vm(tmp_path, "Empty.vm", "// nothing here\n\n")
    assert main([str(src)]) == 0
    assert not (tmp_path / "Empty.asm").exists()


def test_missing_input(tmp_path):
    assert main([str(tmp_path / "nope.vm")]) == 3


def test_verbose_prints_lines(tmp_path, capsys):
    src = write_vm(tmp_path, "V.vm", "// c\nsub\n")
    assert main([str(src), "-v"]) == 0
    assert "parsing line 2: sub" in capsys.readouterr().out


def test_script_name_for(tmp_path):
    assert script_name_for(tmp_path / "Foo.vm") == "Foo"
    assert script_name_for(tmp_path / "Foo.test.vm") == "Foo"
