from __future__ import annotations

from face_exporter.rpc.kafkapixy import PRODUCE_METHOD, ProdRq, ProdRs


def test_produce_method_path() -> None:
    assert PRODUCE_METHOD == "/kafkapixy.KafkaPixy/Produce"


def test_produce_request_wire_fields() -> None:
    requisicao = ProdRq(key_undefined=True, topic="faces", message=b"\x00\x01")

    # topic = campo 2 (string), key_undefined = campo 4 (bool), message = campo 5 (bytes)
    assert requisicao.SerializeToString() == b"\x12\x05faces" + b"\x20\x01" + b"\x2a\x02\x00\x01"


def test_produce_response_fields() -> None:
    resposta = ProdRs.FromString(b"\x08\x03\x10\x2a")
    assert (resposta.partition, resposta.offset) == (3, 42)
