"""
Utilitários para marcação e codificação de imagens.
"""
import cv2
import numpy as np
from face_exporter.config.settings import COR_AZUL, ESPESSURA_MARCACAO, QUALIDADE_JPEG
from face_exporter.errors import PublishError

_EXTENSOES = {
    "jpeg": ".jpg",
    "png": ".png",
}

def marcar_faces(frame, regioes, cor=COR_AZUL, espessura=ESPESSURA_MARCACAO):
    """Desenha um retângulo sobre cada região, alterando o próprio frame"""
    for regiao in regioes:
        cv2.rectangle(frame, regiao.canto_superior, regiao.canto_inferior, cor, espessura)

def codificar_imagem(imagem, formato="raw", qualidade=None):
    """
    Serializa a imagem para envio

    Args:
        imagem: Array numpy com a imagem
        formato: "raw" (buffer de pixels), "jpeg" ou "png"
        qualidade: Qualidade JPEG (0-100)
    """
    if formato == "raw":
        return np.ascontiguousarray(imagem).tobytes()

    if formato not in _EXTENSOES:
        raise ValueError(f"Formato de imagem desconhecido: {formato}")

    parametros = []
    if formato == "jpeg":
        parametros = [cv2.IMWRITE_JPEG_QUALITY, qualidade if qualidade is not None else QUALIDADE_JPEG]

    ok, buffer = cv2.imencode(_EXTENSOES[formato], imagem, parametros)
    if not ok:
        raise PublishError(f"Falha ao codificar imagem como {formato}")

    return buffer.tobytes()
