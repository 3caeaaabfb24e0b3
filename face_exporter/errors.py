"""
Exceções do exportador de faces.
"""

class FaceExporterError(Exception):
    """Erro base: qualquer subclasse encerra o processo com status diferente de zero"""

class DeviceError(FaceExporterError):
    def __init__(self, mensagem="Não foi possível abrir o dispositivo de captura."):
        super().__init__(mensagem)

class DeviceReadError(FaceExporterError):
    def __init__(self, mensagem="Não foi possível ler do dispositivo."):
        super().__init__(mensagem)

class ClassifierLoadError(FaceExporterError):
    def __init__(self, caminho):
        super().__init__(f"Erro ao ler o arquivo do classificador: {caminho}")
        self.caminho = caminho

class ExporterConnectionError(FaceExporterError):
    pass

class PublishError(FaceExporterError):
    pass

class CaptureRetryExceededError(FaceExporterError):
    def __init__(self, tentativas):
        super().__init__(f"Nenhuma face detectada após {tentativas} tentativas")
        self.tentativas = tentativas
