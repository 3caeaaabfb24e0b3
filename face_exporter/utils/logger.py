"""
Logging em console do exportador de faces.
Cada linha sai como [TIPO] [HH:MM:SS] mensagem.
"""
from datetime import datetime

def _timestamp():
    return datetime.now().strftime("%H:%M:%S")

def log_info(mensagem):
    """Eventos gerais do sistema (inicialização, encerramento)"""
    print(f"[INFO] [{_timestamp()}] {mensagem}")

def log_face(mensagem):
    """Resultado da detecção de faces"""
    print(f"[FACE] [{_timestamp()}] {mensagem}")

def log_captura(mensagem):
    """Abertura e liberação do dispositivo de captura"""
    print(f"[CAPTURA] [{_timestamp()}] {mensagem}")

def log_envio(mensagem):
    """Respostas do endpoint remoto aos envios de imagem"""
    print(f"[ENVIO] [{_timestamp()}] {mensagem}")

def log_debug(mensagem, modo_debug=True):
    """Detalhes das tentativas de captura; só aparece com --debug"""
    if modo_debug:
        print(f"[DEBUG] [{_timestamp()}] {mensagem}")

def log_aviso(mensagem):
    """Situações suspeitas que não interrompem a execução"""
    print(f"[AVISO] [{_timestamp()}] {mensagem}")

def log_error(mensagem):
    """Falhas fatais e falhas ao liberar recursos"""
    print(f"[ERRO] [{_timestamp()}] {mensagem}")
