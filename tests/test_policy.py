import importlib


def test_policy_defaults(monkeypatch):
    for name in (
        "SSS_RECOVER_MAX_THRESHOLD",
        "SSS_RECOVER_MAX_VALUE_LENGTH",
        "SSS_RECOVER_SELECTION",
        "SSS_RECOVER_AUDIT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    from sss_recover.policy import load_policy

    policy = load_policy()
    assert policy.max_threshold == 1024
    assert policy.max_value_length == 65536
    assert policy.selection == "sorted"
    assert policy.audit_dir is None


def test_policy_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SSS_RECOVER_MAX_THRESHOLD", "16")
    monkeypatch.setenv("SSS_RECOVER_MAX_VALUE_LENGTH", "512")
    monkeypatch.setenv("SSS_RECOVER_SELECTION", "Document")
    monkeypatch.setenv("SSS_RECOVER_AUDIT_DIR", str(tmp_path))

    policy_module = importlib.import_module("sss_recover.policy")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.max_threshold == 16
        assert policy.max_value_length == 512
        assert policy.selection == "document"
        assert policy.audit_dir == str(tmp_path)
    finally:
        monkeypatch.delenv("SSS_RECOVER_MAX_THRESHOLD", raising=False)
        monkeypatch.delenv("SSS_RECOVER_MAX_VALUE_LENGTH", raising=False)
        monkeypatch.delenv("SSS_RECOVER_SELECTION", raising=False)
        monkeypatch.delenv("SSS_RECOVER_AUDIT_DIR", raising=False)
        importlib.reload(policy_module)


def test_unparsable_values_fall_back(monkeypatch):
    monkeypatch.setenv("SSS_RECOVER_MAX_THRESHOLD", "many")
    monkeypatch.setenv("SSS_RECOVER_SELECTION", "random")
    from sss_recover.policy import load_policy

    policy = load_policy()
    assert policy.max_threshold == 1024
    assert policy.selection == "sorted"
