#!/usr/bin/env python3
"""
Script de démarrage du serveur Dice Roller
"""
import uvicorn

from diceroller.config import Config
from diceroller.main import app

if __name__ == "__main__":
    print("🎲 Démarrage du serveur Dice Roller...")
    print(f"🌐 Serveur disponible sur: http://localhost:{Config.PORT}")
    print(f"📊 Etat de la partie: http://localhost:{Config.PORT}/api/state")

    uvicorn.run(
        app,
        host=Config.HOST,
        port=Config.PORT,
        log_level=Config.LOG_LEVEL
    )
