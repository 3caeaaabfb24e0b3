"""
Configurações do exportador de faces.
Contém as constantes padrão e a estrutura de configuração passada aos componentes.
"""
import os
import re
from dataclasses import dataclass
from typing import Optional, Tuple

# Câmera e captura
DEVICE_ID = 1                # Índice da câmera usada por padrão
CAPTURE_RATE = 1.0           # Intervalo entre tentativas de captura e tempo de exibição (segundos)
MAX_TENTATIVAS = None        # None = tentar indefinidamente enquanto não houver faces

# Classificador Haar usado para detectar faces
CLASSIFIER_PATH = "haarcascade_frontalface_default.xml"
SCALE_FACTOR = 1.1
MIN_NEIGHBORS = 3

# Endpoint gRPC do Meroxa (compatível com Kafka-Pixy)
MEROXA_ENDPOINT = os.environ.get("MEROXA_ENDPOINT", "endpoint-grpc.meroxa.io:80")
MEROXA_TLS = False
MEROXA_USERNAME = os.environ.get("MEROXA_USERNAME", "")
MEROXA_PASSWORD = os.environ.get("MEROXA_PASSWORD", "")
MEROXA_STREAM = os.environ.get("MEROXA_STREAM", "")
TIMEOUT_CONEXAO = 5.0        # Segundos aguardando o canal ficar pronto (0 = não aguardar)

# Formato da imagem enviada
FORMATO_IMAGEM = "raw"       # raw, jpeg ou png
QUALIDADE_JPEG = 95          # Qualidade de codificação (0-100)

# Janela de visualização
JANELA_TITULO = "Face Detect"
TECLA_ESC = 27

# Configurações de debug
MODO_DEBUG = False

# Cores para visualização (BGR)
COR_AZUL = (255, 0, 0)

ESPESSURA_MARCACAO = 3

_UNIDADES_DURACAO = {
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_NUMERO = r"\d+(?:\.\d+)?"
_PARTE_DURACAO = re.compile(rf"({_NUMERO})(ms|s|m|h)")
_PADRAO_DURACAO = re.compile(rf"^(?:{_NUMERO}(?:ms|s|m|h))+$")
_PADRAO_SEGUNDOS = re.compile(rf"^{_NUMERO}$")

def parse_duracao(texto):
    """
    Converte uma duração em segundos.

    Aceita números simples ("1", "0.5") ou valores com unidade, inclusive
    compostos como no Go ("500ms", "1s", "2m", "1m30s", "1h2m0.5s").
    """
    valor = str(texto).strip().lower()
    if _PADRAO_SEGUNDOS.match(valor):
        return float(valor)
    if not _PADRAO_DURACAO.match(valor):
        raise ValueError(f"Duração inválida: {texto!r}")
    return sum(float(numero) * _UNIDADES_DURACAO[unidade] for numero, unidade in _PARTE_DURACAO.findall(valor))

@dataclass
class Configuracao:
    """Configuração do sistema, criada uma vez na inicialização"""

    device_id: int = DEVICE_ID
    capture_rate: float = CAPTURE_RATE
    classifier_path: str = CLASSIFIER_PATH
    meroxa_endpoint: str = MEROXA_ENDPOINT
    meroxa_tls: bool = MEROXA_TLS
    meroxa_username: str = MEROXA_USERNAME
    meroxa_password: str = MEROXA_PASSWORD
    meroxa_stream: str = MEROXA_STREAM
    max_tentativas: Optional[int] = MAX_TENTATIVAS
    continuo: bool = False
    mostrar_janela: bool = True
    formato_imagem: str = FORMATO_IMAGEM
    qualidade_jpeg: int = QUALIDADE_JPEG
    timeout_conexao: float = TIMEOUT_CONEXAO
    modo_debug: bool = MODO_DEBUG
    cor_marcacao: Tuple[int, int, int] = COR_AZUL
    espessura_marcacao: int = ESPESSURA_MARCACAO

    @property
    def intervalo_ms(self) -> int:
        """Intervalo de captura em milissegundos, usado como tempo de espera da janela"""
        return int(self.capture_rate * 1000)

    @classmethod
    def from_args(cls, args):
        """Cria a configuração a partir dos argumentos de linha de comando"""
        return cls(
            device_id=args.device,
            capture_rate=args.rate,
            classifier_path=args.classifier,
            meroxa_endpoint=args.meroxa_endpoint,
            meroxa_tls=args.meroxa_tls,
            meroxa_username=args.meroxa_username,
            meroxa_password=args.meroxa_password,
            meroxa_stream=args.meroxa_stream,
            max_tentativas=args.max_tentativas,
            continuo=args.continuo,
            mostrar_janela=not args.sem_janela,
            formato_imagem=args.formato,
            timeout_conexao=args.timeout_conexao,
            modo_debug=args.debug,
        )
