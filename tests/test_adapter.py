import pytest

from gofpatterns.adapter import Adapter, Client, Data, Service, SpecificData, main


def test_adapter_forwards_request_and_returns_code(capsys):
    adapter = Adapter(Service())
    code = adapter.request(Data(12345, 0))
    assert code == 0
    assert capsys.readouterr().out == "Request: 12345 0\n"


def test_adapter_converts_negative_number(capsys):
    assert Adapter(Service()).request(Data(-7, 3)) == 0
    assert capsys.readouterr().out == "Request: -7 3\n"


def test_service_prints_specific_request(capsys):
    assert Service().specific_request(SpecificData("abc", 5)) == 0
    assert capsys.readouterr().out == "Request: abc 5\n"


def test_adapter_serves_as_client(capsys):
    client: Client = Adapter(Service())
    assert isinstance(client, Client)
    assert client.request(Data(1, 2)) == 0
    assert capsys.readouterr().out.startswith("Request: 1 2")


def test_client_is_abstract():
    with pytest.raises(TypeError):
        Client()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Request: 12345 0\nSuccess.\n"