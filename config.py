import os
import sys
import json

CONFIG_FILE = 'playlist_config.json'

def get_config():

    file_config = {}
    if os.path.exists(CONFIG_FILE):
        with open(CONFIG_FILE, 'r') as f:
            file_config = json.load(f)

    config = {
        "debug": False,

        # язык сообщений: eng или rus
        # messages language: eng or rus
        "language": "eng",

        # файл с командами, иначе читается stdin
        # command script file, stdin when omitted
        "script": None if len(sys.argv)<=1 else sys.argv[1],
    }
    config.update(file_config)
    return config

class Messages_eng:
    EMPTY_PLAYLIST = "The list is empty!"
    EMPTY_DELETE = "Cannot delete from an empty playlist"
    OUT_OF_RANGE = "Index {} is out of bounds, enter a number from 0 to {}"
    NOT_POSITIVE = "Please enter a positive integer, got {}"
    NEGATIVE_DURATION = "Duration must be a non-negative number: {}"
    NOT_FOUND = "Episode not found: {}"
    FOUND = "Found {} at {}"
    NEXT = "After {} comes {}"
    PREV = "Before {} comes {}"
    ADDED = "Added {}"
    REMOVED = "Removed {}"
    SURVIVOR = "Survivor {}"
    SIZE = "Size: {}"
    TOTAL = "Total: {:.1f}MIN"
    CLEARED = "Cleared"
    UNKNOWN_COMMAND = "Unknown command: {}"
    BAD_ARGUMENTS = "Bad arguments for {}: {}"
    HELP = "Commands: addfirst T D, addlast T D, insert T D I, deletefirst, deletelast, " \
        "delete T, eliminate M, forward, backward, size, total, find T, next T, prev T, clear, help"

class Messages_rus:
    EMPTY_PLAYLIST = "Список пуст!"
    EMPTY_DELETE = "Нельзя удалить из пустого списка"
    OUT_OF_RANGE = "Индекс {} вне диапазона, введите число от 0 до {}"
    NOT_POSITIVE = "Введите положительное целое число, получено {}"
    NEGATIVE_DURATION = "Длительность должна быть неотрицательным числом: {}"
    NOT_FOUND = "Эпизод не найден: {}"
    FOUND = "Найден {} в позиции {}"
    NEXT = "После {} идет {}"
    PREV = "Перед {} идет {}"
    ADDED = "Добавлен {}"
    REMOVED = "Удален {}"
    SURVIVOR = "Остался {}"
    SIZE = "Размер: {}"
    TOTAL = "Всего: {:.1f}MIN"
    CLEARED = "Очищен"
    UNKNOWN_COMMAND = "Неизвестная команда: {}"
    BAD_ARGUMENTS = "Неверные аргументы для {}: {}"
    HELP = "Команды: addfirst T D, addlast T D, insert T D I, deletefirst, deletelast, " \
        "delete T, eliminate M, forward, backward, size, total, find T, next T, prev T, clear, help"

class Messages(Messages_eng):
    pass

def get_messages(language: str):
    if language == "rus":
        return Messages_rus
    return Messages

if __name__ == '__main__':

    print(get_config())
