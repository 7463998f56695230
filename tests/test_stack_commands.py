from dsworks.stack_commands import main, run


def test_push_back_exit():
    assert run("push 1\nback\nexit\n") == "ok\n1\nbye\n"


def test_back_on_empty_reports_error():
    assert run("back") == "error\n"


def test_pop_returns_pushed_values_in_reverse():
    output = run("push 5 push 7 pop pop").split()
    assert output == ["ok", "ok", "7", "5"]


def test_pop_on_empty_prints_nothing():
    assert run("pop size") == "0\n"


def test_size_and_clear():
    output = run("push 1 push 2 size clear size").split()
    assert output == ["ok", "ok", "2", "ok", "0"]


def test_commands_after_exit_are_ignored():
    output = run("exit push 3 size").split()
    assert output == ["bye"]


def test_unknown_words_are_skipped():
    output = run("hello push 4 world back").split()
    assert output == ["ok", "4"]


def test_many_pushes_survive_growth():
    commands = " ".join(f"push {n}" for n in range(250)) + " size back"
    output = run(commands).split()
    assert output[-2:] == ["250", "249"]


def test_main_reads_and_writes_files(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("push 9\nback\nexit\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == run("push 9\nback\nexit\n")