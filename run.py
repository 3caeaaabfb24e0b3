#!/usr/bin/env python3
"""
Script de inicialização do exportador de faces.
"""
import sys
from face_exporter.main import main

if __name__ == "__main__":
    sys.exit(main())
