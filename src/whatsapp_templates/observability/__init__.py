"""Observabilidade: logging estruturado."""
