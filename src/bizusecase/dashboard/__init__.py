"""Streamlit portfolio dashboard; run with ``streamlit run src/bizusecase/dashboard/app.py``."""
