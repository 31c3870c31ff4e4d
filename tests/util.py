import glob
import os

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def get_data(*paths):
    return os.path.join(DATA_DIR, *paths)


def glob_exists(*pos, n=1):
    globexpr = os.path.join(*pos)
    file_list = glob.glob(globexpr)
    if len(file_list) == n:
        return file_list[0] if n == 1 else file_list
    print(globexpr)
    print(file_list)
    return False
