from unittest.mock import patch


def test_available_profiles_from_credentials_and_config(tmp_path, monkeypatch):
    from local_tools.aws_session import get_available_aws_profiles

    aws_dir = tmp_path / ".aws"
    aws_dir.mkdir()
    (aws_dir / "credentials").write_text("[default]\n[dev]\n", encoding="utf-8")
    (aws_dir / "config").write_text("[profile dev]\n[profile prod]\n[default]\n", encoding="utf-8")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_available_aws_profiles() == ["default", "dev", "prod"]


def test_available_profiles_fallback(tmp_path, monkeypatch):
    from local_tools.aws_session import get_available_aws_profiles

    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_available_aws_profiles() == ["default"]


def test_build_session_profile_handling():
    from local_tools.aws_session import build_session

    with patch("local_tools.aws_session.boto3.Session") as session:
        build_session("dev")
        build_session("default")
        build_session(None)

    assert [c.kwargs for c in session.call_args_list] == [{"profile_name": "dev"}, {}, {}]


def test_build_client_only_passes_given_options():
    from local_tools.aws_session import build_client

    class FakeSession:
        def __init__(self):
            self.calls = []

        def client(self, service, **kwargs):
            self.calls.append((service, kwargs))
            return object()

    session = FakeSession()
    build_client(session, "dynamodb", region="us-east-1", endpoint_url="http://localhost:8000")
    build_client(session, "lambda")

    assert session.calls == [
        ("dynamodb", {"region_name": "us-east-1", "endpoint_url": "http://localhost:8000"}),
        ("lambda", {}),
    ]
