"""Moteur de règles Congklak et couches d'orchestration associées."""
