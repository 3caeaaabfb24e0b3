from setuptools import setup, find_namespace_packages

setup(
    name="face_exporter",
    version="0.1",
    packages=find_namespace_packages(include=["face_exporter", "face_exporter.*"]),
    install_requires=[
        'opencv-python>=4.8.0.76,<5',
        'numpy>=1.23.5',
        'grpcio>=1.59.0',
        'protobuf>=4.25.0'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    entry_points={
        'console_scripts': ['face-exporter=face_exporter.main:main']
    }
)
