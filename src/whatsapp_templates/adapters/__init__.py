"""Adapters para a API Meta/WhatsApp."""
