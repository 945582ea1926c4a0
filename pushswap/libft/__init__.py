"""Small character, string, memory, list, output, printf and line-reading helpers."""