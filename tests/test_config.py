from netflow.config import MAX_FLOW_CONFIG, MaxFlowConfig


def test_defaults():
    config = MaxFlowConfig()
    assert config.record_flow_state is True
    assert config.stop_at_sink is False
    assert config.default_source == 0
    assert config.default_sink is None


def test_resolve_terminals_defaults_to_first_and_last_node():
    assert MaxFlowConfig().resolve_terminals(5) == (0, 4)


def test_resolve_terminals_keeps_explicit_values():
    assert MaxFlowConfig().resolve_terminals(5, 2, 3) == (2, 3)
    assert MaxFlowConfig().resolve_terminals(5, sink=0) == (0, 0)


def test_resolve_terminals_uses_configured_defaults():
    config = MaxFlowConfig(default_source=1, default_sink=2)
    assert config.resolve_terminals(10) == (1, 2)


def test_global_instance():
    assert isinstance(MAX_FLOW_CONFIG, MaxFlowConfig)
