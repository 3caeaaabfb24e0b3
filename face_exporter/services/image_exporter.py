"""
Serviço para envio das imagens anotadas ao Meroxa via gRPC (Kafka-Pixy Produce).
"""
import base64
from typing import NamedTuple

import grpc

from face_exporter.config.settings import FORMATO_IMAGEM, TIMEOUT_CONEXAO
from face_exporter.errors import ExporterConnectionError, PublishError
from face_exporter.rpc.kafkapixy import PRODUCE_METHOD, ProdRq, ProdRs
from face_exporter.utils.image_utils import codificar_imagem
from face_exporter.utils.logger import log_info, log_envio, log_aviso, log_error

class Credenciais(NamedTuple):
    """Par usuário/senha para autenticação básica"""

    username: str
    password: str

def cabecalho_autorizacao(credenciais):
    """Retorna o valor do cabeçalho authorization: "Basic " + base64(usuario:senha)"""
    auth = f"{credenciais.username}:{credenciais.password}"
    return "Basic " + base64.b64encode(auth.encode("utf-8")).decode("ascii")

class ImageExporter:
    """Publica imagens em um stream do Meroxa"""

    def __init__(self, canal, stream, credenciais, formato=FORMATO_IMAGEM, qualidade=None):
        """
        Args:
            canal: canal gRPC já aberto
            stream: nome do stream (tópico) de destino
            credenciais: Credenciais usadas em cada chamada
            formato: formato da imagem enviada (raw, jpeg ou png)
            qualidade: qualidade JPEG
        """
        self.canal = canal
        self.stream = stream
        self.credenciais = credenciais
        self.formato = formato
        self.qualidade = qualidade
        self._produce = canal.unary_unary(
            PRODUCE_METHOD,
            request_serializer=ProdRq.SerializeToString,
            response_deserializer=ProdRs.FromString,
        )

    def enviar(self, frame):
        """Envia o frame ao stream. Levanta PublishError se a chamada remota falhar."""
        requisicao = ProdRq(
            key_undefined=True,
            topic=self.stream,
            message=codificar_imagem(frame, self.formato, self.qualidade),
        )
        # Recalculado a cada chamada a partir do par de credenciais
        metadata = (("authorization", cabecalho_autorizacao(self.credenciais)),)

        try:
            resposta = self._produce(requisicao, metadata=metadata)
        except grpc.RpcError as e:
            raise PublishError(f"Não foi possível produzir a mensagem: {e}") from e

        log_envio(f"Resposta do Meroxa: {str(resposta).strip()}")

    def fechar(self):
        """Fecha o canal gRPC"""
        try:
            self.canal.close()
            log_info("Conexão com o Meroxa encerrada")
        except Exception as e:
            log_error(f"Não foi possível fechar a conexão gRPC: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.fechar()
        return False

def conectar(endpoint, tls, credenciais, stream, timeout=TIMEOUT_CONEXAO, formato=FORMATO_IMAGEM, qualidade=None):
    """
    Abre o canal gRPC e cria o exportador

    Args:
        endpoint: endereço host:porta do endpoint gRPC
        tls: usar TLS na conexão
        credenciais: Credenciais para autenticação básica
        stream: nome do stream de destino
        timeout: segundos aguardando o canal ficar pronto (0 ou None = não aguardar)
    """
    log_info(f"Abrindo conexão com o endpoint gRPC do Meroxa {endpoint}")

    if tls:
        canal = grpc.secure_channel(endpoint, grpc.ssl_channel_credentials())
    else:
        if credenciais.username or credenciais.password:
            log_aviso("TLS desativado: as credenciais serão enviadas sem criptografia")
        canal = grpc.insecure_channel(endpoint)

    if timeout:
        try:
            grpc.channel_ready_future(canal).result(timeout=timeout)
        except grpc.FutureTimeoutError as e:
            canal.close()
            raise ExporterConnectionError(
                f"Não foi possível conectar ao gRPC em {endpoint} após {timeout}s"
            ) from e

    return ImageExporter(canal, stream, credenciais, formato=formato, qualidade=qualidade)
