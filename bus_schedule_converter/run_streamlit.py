# run_streamlit.py
import os, subprocess, sys

# jump into the folder where the app lives
os.chdir(os.path.dirname(os.path.abspath(__file__)))

# launches Streamlit exactly as you would in a console
subprocess.run(
    [sys.executable, "-m", "streamlit", "run", "app.py"],
    check=True
)
