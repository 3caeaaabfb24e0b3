"""
Serviço para captura de frames de uma câmera local.
Captura síncrona: um único buffer de frame reaproveitado a cada leitura.
"""
import cv2
from face_exporter.errors import DeviceError
from face_exporter.utils.logger import log_captura, log_error

class VideoCapture:
    """Fonte de frames sobre cv2.VideoCapture"""

    def __init__(self, device_id):
        """
        Inicializa o capturador de vídeo

        Args:
            device_id: índice da câmera
        """
        self.device_id = device_id
        self.cap = None
        # Sobrescrito a cada leitura; quem precisar mantê-lo entre iterações deve copiá-lo
        self.frame = None

    def abrir(self):
        """Abre o dispositivo de captura"""
        log_captura(f"Abrindo captura de vídeo no dispositivo {self.device_id}")
        self.cap = cv2.VideoCapture(self.device_id)

        if not self.cap.isOpened():
            self.fechar()
            raise DeviceError(f"Não foi possível abrir a captura de vídeo no dispositivo {self.device_id}")

        return self

    def ler(self):
        """Lê o próximo frame para o buffer. Retorna False se a leitura falhar."""
        if self.cap is None:
            return False

        if self.frame is None:
            ret, frame = self.cap.read()
        else:
            ret, frame = self.cap.read(self.frame)

        if not ret:
            return False

        self.frame = frame
        return True

    def frame_vazio(self):
        """Leitura válida, mas sem dados de imagem (ex.: câmera aquecendo)"""
        return self.frame is None or self.frame.size == 0

    def fechar(self):
        """Libera o dispositivo. Pode ser chamado mais de uma vez."""
        if self.cap is None:
            return

        cap, self.cap = self.cap, None
        try:
            cap.release()
            log_captura("Captura de vídeo encerrada")
        except Exception as e:
            log_error(f"Não foi possível fechar a captura de vídeo: {e}")

    def __enter__(self):
        if self.cap is None:
            self.abrir()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.fechar()
        return False
