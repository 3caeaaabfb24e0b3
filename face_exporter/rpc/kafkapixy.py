"""
Mensagens do serviço gRPC Kafka-Pixy usadas pelo exportador.

Apenas o método Produce é necessário; os descritores são montados em tempo de
execução a partir do mesmo esquema de kafkapixy.proto.
"""
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACOTE = "kafkapixy"
SERVICO = "KafkaPixy"
PRODUCE_METHOD = f"/{PACOTE}.{SERVICO}/Produce"

_Campo = descriptor_pb2.FieldDescriptorProto

# (nome, número, tipo)
_CAMPOS_PROD_RQ = [
    ("cluster", 1, _Campo.TYPE_STRING),
    ("topic", 2, _Campo.TYPE_STRING),
    ("key_value", 3, _Campo.TYPE_BYTES),
    ("key_undefined", 4, _Campo.TYPE_BOOL),
    ("message", 5, _Campo.TYPE_BYTES),
    ("async_mode", 6, _Campo.TYPE_BOOL),
]

_CAMPOS_PROD_RS = [
    ("partition", 1, _Campo.TYPE_INT32),
    ("offset", 2, _Campo.TYPE_INT64),
]

def _adicionar_mensagem(arquivo, nome, campos):
    mensagem = arquivo.message_type.add()
    mensagem.name = nome
    for nome_campo, numero, tipo in campos:
        campo = mensagem.field.add()
        campo.name = nome_campo
        campo.number = numero
        campo.type = tipo
        campo.label = _Campo.LABEL_OPTIONAL

def _montar_arquivo():
    arquivo = descriptor_pb2.FileDescriptorProto()
    arquivo.name = f"{PACOTE}.proto"
    arquivo.package = PACOTE
    arquivo.syntax = "proto3"

    _adicionar_mensagem(arquivo, "ProdRq", _CAMPOS_PROD_RQ)
    _adicionar_mensagem(arquivo, "ProdRs", _CAMPOS_PROD_RS)

    servico = arquivo.service.add()
    servico.name = SERVICO
    metodo = servico.method.add()
    metodo.name = "Produce"
    metodo.input_type = f".{PACOTE}.ProdRq"
    metodo.output_type = f".{PACOTE}.ProdRs"
    return arquivo

# Pool próprio para não colidir com um kafkapixy_pb2 gerado no pool padrão
_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_montar_arquivo().SerializeToString())

ProdRq = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACOTE}.ProdRq"))
ProdRs = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACOTE}.ProdRs"))
