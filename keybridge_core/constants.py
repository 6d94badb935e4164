# keybridge_core/constants.py
ALGORITHM_RSA = "RSA"
ALGORITHM_DSA = "DSA"
