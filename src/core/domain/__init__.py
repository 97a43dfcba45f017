"""Dominio de la tienda: modelos tipados, enums extensibles y `RemoteResult`.

No importa nada de HTTP ni de la CLI; los adaptadores producen estos tipos.
"""
