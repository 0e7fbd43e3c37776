import sys

import pgp_config
from pgp_export_key import export_key, export_message, copy_message
from pgp_keytypes import Curve, RSABits, EllipticCurve, RSA, Identity, KeyGenerationRequest
from pgp_outcome import console_observer
from pgp_session import KeyGenSession

MAIN_MENU = "Do you want to [GENERATE] keys, [SHOW] keys, [EXPORT] keys or [Q]uit?"
KEY_TYPE_MENU = "Key Type: [ECC] (Elliptic Curve) or [RSA]? (default {default})"
CURVE_MENU = "ECC Curve: [curve25519] (Modern, Fast), [p256], [p384] or [p521]? (default {default})"
RSA_BITS_MENU = "RSA Bits: [2048], [3072] or [4096]? (default {default})"
WHICH_KEY_MENU = "Which key? [PUBLIC], [PRIVATE] or [BOTH]?"

CURVES = [curve.value for curve in Curve]
RSA_SIZES = [str(int(bits)) for bits in RSABits]


# Function that keeps asking until the answer is one of the options
def ask(prompt, options, default=None):
    answer = input(prompt + "\n").strip()
    while True:
        if not answer and default is not None:
            return default
        for option in options:
            if answer.lower() == option.lower():
                return option
        answer = input("UNKNOWN OPTION. " + prompt + "\n").strip()


# Function that asks which algorithm the keys should use
def ask_algorithm():
    key_type = ask(KEY_TYPE_MENU.format(default=pgp_config.DEFAULT_KEY_TYPE),
                   ['ECC', 'RSA'], pgp_config.DEFAULT_KEY_TYPE)
    if key_type == 'RSA':
        default_bits = str(pgp_config.DEFAULT_RSA_BITS)
        bits = ask(RSA_BITS_MENU.format(default=default_bits), RSA_SIZES, default_bits)
        return RSA(int(bits))
    curve = ask(CURVE_MENU.format(default=pgp_config.DEFAULT_CURVE),
                CURVES, pgp_config.DEFAULT_CURVE)
    return EllipticCurve(curve)


# Function that reads the identity and algorithm and starts the generation
def generateKeys(session):
    if session.busy:
        print("Keys are already being generated, please wait.")
        return
    name = input("Please enter your name\n")
    email = input("Please enter your email\n")
    algorithm = ask_algorithm()
    worker = session.submit(KeyGenerationRequest(Identity(name, email), algorithm))
    if worker is None:
        print("Keys are already being generated, please wait.")
        return
    print("Generating Keys... (◕‿◕✿)", end='', flush=True)
    # the worker announces the outcome itself, keep the prompt alive meanwhile
    while not session.wait(timeout=0.5):
        print(".", end='', flush=True)
    print()


# Function that prints a key so it can be copied from the terminal
def showKeys(session):
    if session.keys is None:
        print("No keys generated yet.")
        return
    which = ask(WHICH_KEY_MENU, ['PUBLIC', 'PRIVATE', 'BOTH'])
    if which in ('PUBLIC', 'BOTH'):
        print(session.keys.public_key_armored)
        print(copy_message('public'))
    if which in ('PRIVATE', 'BOTH'):
        print(session.keys.private_key_armored)
        print(copy_message('private'))


# Function that saves a key to an .asc file
def exportKeys(session):
    if session.keys is None:
        print("No keys generated yet.")
        return
    which = ask(WHICH_KEY_MENU, ['PUBLIC', 'PRIVATE', 'BOTH'])
    kinds = ['public', 'private'] if which == 'BOTH' else [which.lower()]
    for kind in kinds:
        text = getattr(session.keys, kind + '_key_armored')
        try:
            path = export_key(text, kind)
        except OSError as e:
            print("Failed to save %s key: %s" % (kind, e))
            continue
        print(export_message(kind), path)


# Function that manages the user menu
def userMenu(session):
    while True:
        option = ask(MAIN_MENU, ['GENERATE', 'SHOW', 'EXPORT', 'Q'])
        if option == 'GENERATE':
            generateKeys(session)
        elif option == 'SHOW':
            showKeys(session)
        elif option == 'EXPORT':
            exportKeys(session)
        elif option == 'Q':
            print("Bye Bye")
            return


def main():
    pgp_config.setup_logging()
    print("PGPchan ♡ OpenPGP key generator")
    session = KeyGenSession(observer=console_observer)
    try:
        userMenu(session)
    except (KeyboardInterrupt, EOFError):
        print()
        sys.exit(0)


if __name__ == "__main__":
    main()
