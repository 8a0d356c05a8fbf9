"""Run with: python -m tuppergraph"""
from tuppergraph.main import main

if __name__ == "__main__":
    main()
