"""
Laço de captura: lê frames até encontrar um com pelo menos uma face.
"""
import time
from face_exporter.errors import DeviceReadError, CaptureRetryExceededError
from face_exporter.utils.logger import log_debug

class FaceCapture:
    """Combina a fonte de vídeo e o detector com espera fixa entre tentativas"""

    def __init__(self, fonte, detector, intervalo, max_tentativas=None, dormir=time.sleep, modo_debug=False):
        """
        Args:
            fonte: fonte de frames (ler(), frame_vazio(), frame)
            detector: detector de faces (detectar_faces(frame))
            intervalo: espera entre tentativas, em segundos
            max_tentativas: limite de esperas antes de desistir (None = sem limite)
            dormir: função usada para aguardar entre tentativas
        """
        self.fonte = fonte
        self.detector = detector
        self.intervalo = intervalo
        self.max_tentativas = max_tentativas
        self.dormir = dormir
        self.modo_debug = modo_debug
        self.tentativas = 0

    def _aguardar(self, motivo):
        if self.max_tentativas is not None and self.tentativas >= self.max_tentativas:
            raise CaptureRetryExceededError(self.tentativas)
        self.tentativas += 1
        log_debug(f"{motivo}; nova tentativa em {self.intervalo}s ({self.tentativas})", self.modo_debug)
        self.dormir(self.intervalo)

    def capturar(self):
        """
        Retorna o primeiro par (frame, regiões) com ao menos uma face.

        Falha de leitura do dispositivo não é repetida: levanta DeviceReadError.
        Frames vazios e frames sem faces aguardam o intervalo e tentam de novo.
        """
        self.tentativas = 0

        while True:
            if not self.fonte.ler():
                raise DeviceReadError()

            if self.fonte.frame_vazio():
                self._aguardar("Frame vazio")
                continue

            frame = self.fonte.frame
            regioes = self.detector.detectar_faces(frame)
            if len(regioes) == 0:
                self._aguardar("Nenhuma face detectada")
                continue

            return frame, regioes
