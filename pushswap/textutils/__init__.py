"""Character, conversion, byte buffer, string, output and printf helpers."""