"""``streamlit run streamlit_app.py`` entrypoint."""

from app import main

main()
