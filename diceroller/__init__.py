"""Serveur de jeu de dés multijoueur en temps réel (Socket.IO)."""
