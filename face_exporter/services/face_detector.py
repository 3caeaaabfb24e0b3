"""
Serviço para detecção de faces com classificador Haar do OpenCV.
"""
import os
import cv2
from face_exporter.config.settings import SCALE_FACTOR, MIN_NEIGHBORS
from face_exporter.errors import ClassifierLoadError
from face_exporter.models.regiao import Regiao
from face_exporter.utils.logger import log_info

def resolver_caminho_classificador(caminho):
    """
    Localiza o arquivo do classificador.

    Se o caminho não existir, procura um arquivo com o mesmo nome entre os
    classificadores distribuídos com o OpenCV.
    """
    if os.path.isfile(caminho):
        return caminho

    diretorio_opencv = getattr(getattr(cv2, "data", None), "haarcascades", None)
    if diretorio_opencv:
        candidato = os.path.join(diretorio_opencv, os.path.basename(caminho))
        if os.path.isfile(candidato):
            return candidato

    return caminho

class FaceDetector:
    """Classe para detecção de faces com cv2.CascadeClassifier"""

    def __init__(self, classifier_path, scale_factor=None, min_neighbors=None):
        """
        Inicializa o detector facial com os parâmetros especificados

        Args:
            classifier_path: Caminho do arquivo XML do classificador
            scale_factor: Redução da imagem a cada escala
            min_neighbors: Vizinhos necessários para aceitar um candidato
        """
        self.classifier_path = classifier_path
        self.scale_factor = scale_factor if scale_factor is not None else SCALE_FACTOR
        self.min_neighbors = min_neighbors if min_neighbors is not None else MIN_NEIGHBORS
        self.classifier = None

    def carregar(self):
        """Carrega o classificador a partir do arquivo"""
        caminho = resolver_caminho_classificador(self.classifier_path)
        try:
            classifier = cv2.CascadeClassifier()
            carregado = classifier.load(caminho)
        except (cv2.error, AttributeError) as e:
            # AttributeError: build do OpenCV sem o módulo objdetect
            raise ClassifierLoadError(caminho) from e

        if not carregado or classifier.empty():
            raise ClassifierLoadError(caminho)

        log_info(f"Classificador carregado: {caminho}")
        self.classifier = classifier
        return self

    def detectar_faces(self, frame):
        """Detecta faces em um frame e retorna a lista de regiões (possivelmente vazia)"""
        if self.classifier is None:
            raise ClassifierLoadError(self.classifier_path)

        if frame.ndim == 3:
            gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        else:
            gray = frame

        faces = self.classifier.detectMultiScale(
            gray,
            scaleFactor=self.scale_factor,
            minNeighbors=self.min_neighbors,
        )

        return [Regiao.de_retangulo(face) for face in faces]

    def fechar(self):
        """Libera o classificador"""
        if self.classifier is None:
            return

        # cv2.CascadeClassifier não expõe close(); a liberação ocorre ao descartar a referência
        self.classifier = None
        log_info("Classificador liberado")

    def __enter__(self):
        if self.classifier is None:
            self.carregar()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.fechar()
        return False
