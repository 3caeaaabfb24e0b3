"""
Modelo de região (retângulo) de uma face detectada.
"""
from typing import NamedTuple, Tuple

class Regiao(NamedTuple):
    """Retângulo alinhado aos eixos, em coordenadas do frame"""

    x: int
    y: int
    largura: int
    altura: int

    @classmethod
    def de_retangulo(cls, retangulo):
        """Cria a região a partir de um retângulo (x, y, w, h) do OpenCV"""
        x, y, w, h = retangulo
        return cls(int(x), int(y), int(w), int(h))

    @property
    def canto_superior(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def canto_inferior(self) -> Tuple[int, int]:
        return (self.x + self.largura, self.y + self.altura)
