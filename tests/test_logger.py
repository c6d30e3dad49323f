import io
import json

from logger.logger import JSONLogger, transition_entry
from logger.report import ReportWriter, format_transition, write_history
from simulator.history import History
from simulator.rule import Move, Rule
from simulator.tape import Tape
from simulator.transition import Transition


def make_transition():
    return Transition(3, Tape("12345", 2, 0), Rule("9", Move.LEFT, 4))


def test_format_transition():
    assert format_transition(make_transition(), 7) == (
        "=============== Step: 7 ===============\n"
        "Tape:\t 1  2 [3] 4  5 \n"
        "State:\t\t3\tReplace:\t9\n"
        "Next state:\t4\tMove:\t\t<\n"
    )


def test_report_writer_uses_running_count():
    stream = io.StringIO()
    history = History()
    history.add_listener(ReportWriter(stream))
    history.add(make_transition())
    history.add(make_transition())
    text = stream.getvalue()
    assert "Step: 1 =" in text
    assert "Step: 2 =" in text
    assert text.count("Next state:") == 2


def test_write_history_numbers_from_zero():
    stream = io.StringIO()
    write_history([make_transition(), make_transition()], stream)
    text = stream.getvalue()
    assert text.startswith("=============== Step: 0 ===============\n")
    assert "Step: 1 =" in text


def test_transition_entry():
    assert transition_entry(make_transition(), 5) == {
        "step": 5,
        "state": 3,
        "head": 2,
        "read": "3",
        "write": "9",
        "move": "<",
        "next_state": 4,
        "tape": "12345",
    }


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_json_logger_writes_steps(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path / "logs"), log_file_prefix="run_")
    history = History()
    history.add_listener(logger.step_listener())
    history.add(make_transition())
    logger.log({"note": "done"})

    entries = read_lines(logger.current_log)
    assert logger.current_log.endswith(f"run_{logger.today}.jsonl")
    assert entries[0]["step"] == 1
    assert entries[0]["tape"] == "12345"
    assert entries[1] == {"note": "done"}


def test_json_logger_summary(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path))
    logger.log_summary({"status": "halted", "steps": 171})
    entries = read_lines(tmp_path / f"summary_{logger.today}.jsonl")
    assert entries[0]["status"] == "halted"
    assert entries[0]["steps"] == 171
    assert "timestamp" in entries[0]


def test_json_logger_history_batch(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path))
    logger.log_history(History([make_transition(), make_transition(), make_transition()]))
    entries = read_lines(logger.current_log)
    assert [entry["step"] for entry in entries] == [1, 2, 3]
    assert all(entry["next_state"] == 4 for entry in entries)


def test_json_logger_rotates_on_new_day(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path))
    logger.today = "2000-01-01"
    logger.current_log = logger._get_log_filename()
    stale_log = logger.current_log

    logger.log_transition(make_transition(), 1)

    assert logger.today != "2000-01-01"
    assert logger.current_log != stale_log
    assert not (tmp_path / "turing_2000-01-01.jsonl").exists()
    assert read_lines(logger.current_log)[0]["step"] == 1
