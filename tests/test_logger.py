from pyshapes.misc.logger import LogLevel, create_logger


def test_info_is_prefixed_with_component(capsys):
    create_logger(verbose=True, name="Polygon").info("built")
    assert capsys.readouterr().out == "[pyshapes] [Polygon] built\n"


def test_quiet_logger_only_shows_warnings_and_errors(capsys):
    logger = create_logger(verbose=False, name="Polygon")
    logger.info("hidden")
    logger.debug("hidden")
    logger.warning("careful")
    logger.error("broken")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[pyshapes] [Polygon] Warning: careful" in captured.err
    assert "[pyshapes] [Polygon] ERROR: broken" in captured.err


def test_debug_payloads_need_debug_level(capsys):
    create_logger(verbose=True, name="Trace").debug([(0, 0)])
    assert capsys.readouterr().out == ""

    create_logger(verbose=True, name="Trace", min_level=LogLevel.DEBUG).debug([(0, 0)])
    assert capsys.readouterr().out == "[pyshapes] [Trace] DEBUG: [(0, 0)]\n"


def test_generic_log(capsys):
    create_logger(verbose=True).log("oops", LogLevel.WARNING)
    assert capsys.readouterr().err == "[pyshapes] Warning: oops\n"


def test_point_traces_are_shortened(capsys):
    logger = create_logger(verbose=True, name="Polygon", min_level=LogLevel.DEBUG)
    logger.points("Resolved 'Big'", [(i, 0.5) for i in range(10)], limit=3)
    assert capsys.readouterr().out == (
        "[pyshapes] [Polygon] DEBUG: Resolved 'Big': 10 points [(0, 0.5), (1, 0.5), (2, 0.5), ... +7 more]\n"
    )


def test_point_traces_are_silent_without_debug_level(capsys):
    create_logger(verbose=True, name="Polygon").points("Resolved 'Big'", [(0, 0)])
    assert capsys.readouterr().out == ""
