"""
Módulo principal do exportador de faces.
Captura um frame com faces, marca as faces e envia a imagem ao Meroxa via gRPC.
"""
import argparse
import sys
from face_exporter.config import settings
from face_exporter.config.settings import Configuracao, parse_duracao
from face_exporter.controllers.detector_controller import DetectorController
from face_exporter.errors import FaceExporterError
from face_exporter.services.image_exporter import Credenciais, conectar
from face_exporter.utils.logger import log_info, log_error

def _duracao(texto):
    try:
        return parse_duracao(texto)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def _tentativas(texto):
    try:
        valor = int(texto)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Número de tentativas inválido: {texto!r}")
    if valor < 1:
        raise argparse.ArgumentTypeError(f"O número de tentativas deve ser ao menos 1: {valor}")
    return valor

def criar_parser():
    """Configura os argumentos de linha de comando"""
    parser = argparse.ArgumentParser(description='Detecção de faces com envio das imagens ao Meroxa via gRPC')
    parser.add_argument('--device', type=int, default=settings.DEVICE_ID, help='ID da câmera')
    parser.add_argument('--rate', type=_duracao, default=settings.CAPTURE_RATE,
                        help='Intervalo de captura (ex.: 1s, 500ms)')
    parser.add_argument('--classifier', type=str, default=settings.CLASSIFIER_PATH,
                        help='Caminho do classificador de faces')
    parser.add_argument('--meroxa.tls', dest='meroxa_tls', action='store_true', default=settings.MEROXA_TLS,
                        help='Ativa TLS na conexão com o endpoint gRPC do Meroxa')
    parser.add_argument('--meroxa.endpoint', dest='meroxa_endpoint', type=str, default=settings.MEROXA_ENDPOINT,
                        help='Endereço do endpoint gRPC do Meroxa')
    parser.add_argument('--meroxa.username', dest='meroxa_username', type=str, default=settings.MEROXA_USERNAME,
                        help='Usuário gRPC do Meroxa')
    parser.add_argument('--meroxa.password', dest='meroxa_password', type=str, default=settings.MEROXA_PASSWORD,
                        help='Senha gRPC do Meroxa')
    parser.add_argument('--meroxa.stream', dest='meroxa_stream', type=str, default=settings.MEROXA_STREAM,
                        help='Stream do Meroxa')
    parser.add_argument('--max-tentativas', type=_tentativas, default=settings.MAX_TENTATIVAS,
                        help='Máximo de tentativas sem faces antes de desistir (padrão: sem limite)')
    parser.add_argument('--continuo', action='store_true',
                        help='Continua capturando até ESC ou Ctrl+C em vez de parar após o primeiro envio')
    parser.add_argument('--sem-janela', action='store_true', help='Não abre a janela de visualização')
    parser.add_argument('--formato', choices=['raw', 'jpeg', 'png'], default=settings.FORMATO_IMAGEM,
                        help='Formato da imagem enviada')
    parser.add_argument('--timeout-conexao', type=float, default=settings.TIMEOUT_CONEXAO,
                        help='Segundos aguardando a conexão gRPC (0 = não aguardar)')
    parser.add_argument('--debug', action='store_true', help='Ativa logs de depuração')
    return parser

def main(argv=None):
    """Função principal do sistema"""
    args = criar_parser().parse_args(argv)
    config = Configuracao.from_args(args)

    try:
        exporter = conectar(
            config.meroxa_endpoint,
            config.meroxa_tls,
            Credenciais(config.meroxa_username, config.meroxa_password),
            config.meroxa_stream,
            timeout=config.timeout_conexao,
            formato=config.formato_imagem,
            qualidade=config.qualidade_jpeg,
        )
    except FaceExporterError as e:
        log_error(str(e))
        return 1

    with exporter:
        try:
            controller = DetectorController(config, exporter)
            ciclos = controller.iniciar()
        except FaceExporterError as e:
            log_error(str(e))
            return 1

    log_info(f"Finalizado após {ciclos} envio(s)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
