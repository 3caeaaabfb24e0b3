from __future__ import annotations

import base64

import grpc
import pytest

from face_exporter.errors import ExporterConnectionError, PublishError
from face_exporter.rpc.kafkapixy import PRODUCE_METHOD, ProdRq, ProdRs
from face_exporter.services import image_exporter
from face_exporter.services.image_exporter import Credenciais, ImageExporter, cabecalho_autorizacao, conectar
from fakes import CanalFalso, ErroRpcFalso

CREDENCIAIS = Credenciais("user", "pass")


def _decodificar(cabecalho: str) -> tuple:
    assert cabecalho.startswith("Basic ")
    usuario, _, senha = base64.b64decode(cabecalho[len("Basic "):]).decode("utf-8").partition(":")
    return usuario, senha


def test_authorization_header_value() -> None:
    assert cabecalho_autorizacao(CREDENCIAIS) == "Basic dXNlcjpwYXNz"


@pytest.mark.parametrize(
    "usuario, senha",
    [("user", "pass"), ("", ""), ("meroxa", "s3nh@:com:dois-pontos"), ("joão", "ção")],
)
def test_authorization_header_recovers_pair(usuario: str, senha: str) -> None:
    assert _decodificar(cabecalho_autorizacao(Credenciais(usuario, senha))) == (usuario, senha)


def test_send_produces_frame_to_stream(frame) -> None:
    canal = CanalFalso(resposta=ProdRs(partition=1, offset=42))
    exporter = ImageExporter(canal, "faces", CREDENCIAIS)

    assert exporter.enviar(frame) is None

    chamada = canal.chamada
    assert chamada.metodo == PRODUCE_METHOD
    assert len(chamada.chamadas) == 1
    requisicao, dados, metadata = chamada.chamadas[0]
    assert requisicao.key_undefined is True
    assert requisicao.topic == "faces"
    assert requisicao.message == frame.tobytes()
    assert ProdRq.FromString(dados).topic == "faces"
    assert metadata == (("authorization", "Basic dXNlcjpwYXNz"),)


def test_every_call_carries_authorization(frame) -> None:
    canal = CanalFalso(resposta=ProdRs())
    exporter = ImageExporter(canal, "faces", CREDENCIAIS)

    exporter.enviar(frame)
    exporter.enviar(frame)

    metadatas = [metadata for _, _, metadata in canal.chamada.chamadas]
    assert metadatas == [(("authorization", "Basic dXNlcjpwYXNz"),)] * 2


def test_send_success_ignores_acknowledgment_content(frame, capsys: pytest.CaptureFixture) -> None:
    exporter = ImageExporter(CanalFalso(resposta=ProdRs()), "faces", CREDENCIAIS)

    exporter.enviar(frame)

    assert "[ENVIO]" in capsys.readouterr().out


def test_send_failure_raises_publish_error(frame) -> None:
    erro = ErroRpcFalso(grpc.StatusCode.UNAUTHENTICATED, "credenciais inválidas")
    exporter = ImageExporter(CanalFalso(erro=erro), "faces", CREDENCIAIS)

    with pytest.raises(PublishError) as excinfo:
        exporter.enviar(frame)

    assert excinfo.value.__cause__ is erro


def test_send_jpeg_payload(frame) -> None:
    canal = CanalFalso(resposta=ProdRs())
    ImageExporter(canal, "faces", CREDENCIAIS, formato="jpeg").enviar(frame)

    requisicao, _, _ = canal.chamada.chamadas[0]
    assert requisicao.message[:2] == b"\xff\xd8"


def test_close_logs_failure(capsys: pytest.CaptureFixture) -> None:
    class CanalQuebrado(CanalFalso):
        def close(self):
            raise RuntimeError("canal já fechado")

    ImageExporter(CanalQuebrado(), "faces", CREDENCIAIS).fechar()

    assert "canal já fechado" in capsys.readouterr().out


def test_connect_insecure_warns_about_credentials(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    canal = CanalFalso()
    monkeypatch.setattr(image_exporter.grpc, "insecure_channel", lambda endpoint: canal)

    exporter = conectar("localhost:8080", False, CREDENCIAIS, "faces", timeout=0)

    assert exporter.canal is canal
    assert exporter.stream == "faces"
    assert "[AVISO]" in capsys.readouterr().out


def test_connect_tls_uses_secure_channel(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    canal = CanalFalso()
    abertos = []
    monkeypatch.setattr(image_exporter.grpc, "ssl_channel_credentials", lambda: "tls")
    monkeypatch.setattr(
        image_exporter.grpc, "secure_channel", lambda endpoint, cred: abertos.append((endpoint, cred)) or canal
    )

    exporter = conectar("endpoint-grpc.meroxa.io:443", True, CREDENCIAIS, "faces", timeout=0)

    assert abertos == [("endpoint-grpc.meroxa.io:443", "tls")]
    assert exporter.canal is canal
    assert "[AVISO]" not in capsys.readouterr().out


def test_connect_timeout_raises_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    canal = CanalFalso()

    class FuturoFalso:
        def result(self, timeout=None):
            raise grpc.FutureTimeoutError()

    monkeypatch.setattr(image_exporter.grpc, "insecure_channel", lambda endpoint: canal)
    monkeypatch.setattr(image_exporter.grpc, "channel_ready_future", lambda c: FuturoFalso())

    with pytest.raises(ExporterConnectionError):
        conectar("localhost:1", False, CREDENCIAIS, "faces", timeout=0.1)

    assert canal.fechado
