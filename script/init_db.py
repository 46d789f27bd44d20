# init_db.py
from quizapp.seed import main

if __name__ == "__main__":
    main()
