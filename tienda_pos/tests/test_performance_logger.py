import pytest

from tienda_pos import performance_logger


@pytest.mark.skipif(not performance_logger.ENABLE_PROFILING, reason="profiling desactivado")
def test_slow_function_is_logged(monkeypatch, tmp_path):
    log_file = tmp_path / 'slow_functions.log'
    monkeypatch.setattr(performance_logger, 'SLOW_FUNCTIONS_LOG', str(log_file))
    monkeypatch.setattr(performance_logger, 'THRESHOLD_WARNING', 0)

    @performance_logger.profile_function(name="Suma de prueba")
    def suma(a, b):
        return a + b

    assert suma(2, 3) == 5
    assert 'Suma de prueba' in log_file.read_text(encoding='utf-8')


@pytest.mark.skipif(not performance_logger.ENABLE_PROFILING, reason="profiling desactivado")
def test_fast_function_is_not_logged(monkeypatch, tmp_path):
    log_file = tmp_path / 'slow_functions.log'
    monkeypatch.setattr(performance_logger, 'SLOW_FUNCTIONS_LOG', str(log_file))

    @performance_logger.profile_function
    def rapida():
        return 1

    assert rapida() == 1
    assert not log_file.exists()


def test_request_log_uses_readable_route_name(monkeypatch, tmp_path):
    log_file = tmp_path / 'performance.log'
    monkeypatch.setattr(performance_logger, 'PERFORMANCE_LOG', str(log_file))

    performance_logger.log_request('POST', '/repairs/17/status', '/repairs/<repair_id>/status', 800)
    performance_logger.log_request('GET', '/otra', '/otra', 5)

    lines = log_file.read_text(encoding='utf-8').splitlines()
    assert lines[0].startswith('[MUY LENTA]')
    assert 'Cambiar estado de reparación' in lines[0]
    assert lines[1].startswith('[OK]')
    assert 'GET /otra' in lines[1]
