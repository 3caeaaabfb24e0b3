"""
Janela local para visualização dos frames anotados.
"""
import time
import cv2
from face_exporter.utils.logger import log_error

class Display:
    """Exibe frames em uma janela do OpenCV"""

    def __init__(self, titulo, habilitado=True, dormir=time.sleep):
        self.titulo = titulo
        self.habilitado = habilitado
        self.dormir = dormir
        self.aberta = False

    def mostrar(self, frame):
        if not self.habilitado:
            return
        cv2.imshow(self.titulo, frame)
        self.aberta = True

    def aguardar(self, duracao_ms):
        """Bloqueia até duracao_ms ou até uma tecla ser pressionada. Retorna a tecla ou -1."""
        if not self.habilitado:
            # Sem janela, apenas mantém o ritmo de captura
            self.dormir(duracao_ms / 1000.0)
            return -1
        tecla = cv2.waitKey(max(int(duracao_ms), 1))
        return tecla & 0xFF if tecla != -1 else -1

    def fechar(self):
        if not self.aberta:
            return
        self.aberta = False
        try:
            cv2.destroyWindow(self.titulo)
        except Exception as e:
            log_error(f"Não foi possível fechar a janela: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.fechar()
        return False
