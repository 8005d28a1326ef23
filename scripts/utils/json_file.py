import json
import os


def load(filename):
    # loads the json content of a file
    # (error will be raised if file doesn't exist or isn't valid json)

    with open(filename) as file:
        return json.load(file)


def save(filename, content):
    # rewrites the whole file, pretty-printed

    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, "w") as outfile:
        json.dump(content, outfile, indent=2)
        outfile.write("\n")

    return filename
