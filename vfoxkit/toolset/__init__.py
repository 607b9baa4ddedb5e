"""Name/value record files and .tool-versions files."""