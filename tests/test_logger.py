import logging

from jscrawler.logger import init_logging


def test_verbose_records_reach_log_file(tmp_path):
    log_path = tmp_path / "jscrawler.log"
    lg = init_logging(verbose=True, log_file=log_path)
    lg.info("Processing URL: %s", "http://a.example/")
    for handler in lg.handlers:
        handler.flush()

    assert lg.level == logging.DEBUG
    assert "Processing URL: http://a.example/" in log_path.read_text(encoding="utf-8")


def test_quiet_mode_only_keeps_errors(tmp_path):
    log_path = tmp_path / "jscrawler.log"
    lg = init_logging(log_file=log_path)
    lg.warning("HTTP Error 404: http://a.example/")
    lg.error("Unexpected failure for http://b.example/")
    for handler in lg.handlers:
        handler.flush()

    text = log_path.read_text(encoding="utf-8")
    assert "HTTP Error 404" not in text
    assert "Unexpected failure" in text


def test_handlers_are_replaced_not_stacked(tmp_path):
    init_logging(log_file=tmp_path / "a.log")
    lg = init_logging()
    assert len(lg.handlers) == 1
    assert lg.propagate is False
