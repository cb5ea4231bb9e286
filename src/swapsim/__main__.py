"""Entry point for running the API as module: python -m swapsim"""

# Load .env file before importing anything else
from dotenv import load_dotenv
load_dotenv()

from swapsim.main import main

if __name__ == "__main__":
    main()
