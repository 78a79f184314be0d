"""Streamlit entry point: ``streamlit run app.py``."""

from src.dashboard.app import main

main()
