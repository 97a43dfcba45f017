"""Contratos (Protocol) entre el Core y los adaptadores.

`Network` transporta peticiones, `RemoteRequest` las describe y `Mapper`
decodifica las respuestas. Los tests sustituyen cualquiera de ellos.
"""
