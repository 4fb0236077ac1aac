from unittest.mock import patch

from nodeo_eval.integrations.secrets import SecretStore


def test_reads_bare_name(clean_env: None) -> None:
    with patch.dict("os.environ", {"JUDGE0_API_KEY": "bare"}):
        assert SecretStore().get_secret("JUDGE0_API_KEY") == "bare"


def test_falls_back_to_prefixed_name(clean_env: None) -> None:
    with patch.dict("os.environ", {"NODEO_EVAL_JUDGE0_API_KEY": "prefixed"}):
        assert SecretStore().get_secret("JUDGE0_API_KEY") == "prefixed"


def test_missing_secret(clean_env: None) -> None:
    assert SecretStore().get_secret("JUDGE0_API_KEY") is None
