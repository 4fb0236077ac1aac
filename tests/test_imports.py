def test_import_nodeo_eval_package() -> None:
    """Tests that the public API is importable from the package root."""
    import nodeo_eval
    from nodeo_eval import CodeRunner, CodeRunnerAsync, ExecutionResult, LocalEvaluator, TestCase

    assert nodeo_eval.__version__ == "0.1.0"
    assert set(nodeo_eval.__all__) >= {"CodeRunner", "CodeRunnerAsync", "ExecutionResult", "LocalEvaluator", "TestCase"}
    assert CodeRunner and CodeRunnerAsync and ExecutionResult and LocalEvaluator and TestCase
