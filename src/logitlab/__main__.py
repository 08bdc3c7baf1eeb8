"""Run with: python -m logitlab"""
from logitlab.main import main

if __name__ == "__main__":
    main()
