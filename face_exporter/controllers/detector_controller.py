"""
Controlador principal: captura, detecta, marca, envia e exibe.
Processamento síncrono em uma única thread.
"""
from contextlib import ExitStack

from face_exporter.config.settings import JANELA_TITULO, TECLA_ESC
from face_exporter.services.display import Display
from face_exporter.services.face_capture import FaceCapture
from face_exporter.services.face_detector import FaceDetector
from face_exporter.services.video_capture import VideoCapture
from face_exporter.utils.image_utils import marcar_faces
from face_exporter.utils.logger import log_info, log_face

class DetectorController:
    """Orquestra fonte de vídeo, detector, exportador e janela"""

    def __init__(self, config, exporter, fonte=None, detector=None, display=None):
        """
        Inicializa o controlador

        Args:
            config: Configuracao do sistema
            exporter: ImageExporter já conectado
            fonte: fonte de frames (padrão: VideoCapture no dispositivo configurado)
            detector: detector de faces (padrão: FaceDetector com o classificador configurado)
            display: janela de exibição (padrão: Display com o título padrão)
        """
        self.config = config
        self.exporter = exporter
        self.fonte = fonte if fonte is not None else VideoCapture(config.device_id)
        self.detector = detector if detector is not None else FaceDetector(config.classifier_path)
        self.display = display if display is not None else Display(JANELA_TITULO, habilitado=config.mostrar_janela)
        self.ciclos = 0

    def iniciar(self):
        """Abre os recursos e executa o laço; todos são liberados ao sair"""
        with ExitStack() as stack:
            fonte = stack.enter_context(self.fonte)
            detector = stack.enter_context(self.detector)
            display = stack.enter_context(self.display)

            captura = FaceCapture(
                fonte,
                detector,
                self.config.capture_rate,
                max_tentativas=self.config.max_tentativas,
                modo_debug=self.config.modo_debug,
            )

            try:
                self._main_loop(captura, display)
            except KeyboardInterrupt:
                log_info("Interrupção de teclado detectada. Encerrando...")

        return self.ciclos

    def _main_loop(self, captura, display):
        """Um ciclo por frame com faces; sem --continuo retorna após o primeiro"""
        while True:
            frame, regioes = captura.capturar()
            log_face(f"{len(regioes)} faces detectadas")

            marcar_faces(frame, regioes, self.config.cor_marcacao, self.config.espessura_marcacao)

            self.exporter.enviar(frame)

            display.mostrar(frame)
            tecla = display.aguardar(self.config.intervalo_ms)
            self.ciclos += 1

            if not self.config.continuo:
                return

            if tecla == TECLA_ESC:
                log_info("Tecla ESC pressionada. Encerrando...")
                return
