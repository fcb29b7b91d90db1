"""Adapter WhatsApp Cloud API: envelope e limites de plataforma."""
