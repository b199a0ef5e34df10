"""Contratos (Protocol) que el Core espera de los adaptadores HTTP.

Los servicios dependen de estas firmas, no de `adapters.petfinder`, así los
tests pueden inyectar fakes sin red.
"""
