"""Shared test data: valid keys and keyed-account builders."""

import json

# Real, valid base58 keys (program ids / well-known mints)
WALLET_A = "11111111111111111111111111111111"
WALLET_B = "Vote111111111111111111111111111111111111111"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WSOL_MINT = "So11111111111111111111111111111111111111112"


def parsed_account(ui_amount, pubkey="TokenAccount1111111111111111111111111111111"):
    """Keyed account in the jsonParsed shape returned by getTokenAccountsByOwner."""
    return {
        "pubkey": pubkey,
        "account": {
            "data": {
                "program": "spl-token",
                "parsed": {
                    "type": "account",
                    "info": {
                        "tokenAmount": {
                            "amount": "0",
                            "decimals": 6,
                            "uiAmount": ui_amount,
                        },
                    },
                },
                "space": 165,
            },
        },
    }


def binary_account(pubkey="BinaryAccount111111111111111111111111111111"):
    """Keyed account the node could not parse - raw base64 data."""
    return {
        "pubkey": pubkey,
        "account": {"data": ["AAAAAAAA", "base64"]},
    }


TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
PARSED_ACCOUNT_KEY = "Stake11111111111111111111111111111111111111"
BINARY_ACCOUNT_KEY = "Config1111111111111111111111111111111111111"


def token_accounts_response_json(ui_amount=1.0):
    """getTokenAccountsByOwner reply with one jsonParsed and one base64 account."""
    def keyed(pubkey, data):
        return {
            "pubkey": pubkey,
            "account": {
                "lamports": 2039280,
                "owner": TOKEN_PROGRAM,
                "executable": False,
                "rentEpoch": 0,
                "space": 165,
                "data": data,
            },
        }

    parsed = {
        "program": "spl-token",
        "parsed": {
            "type": "account",
            "info": {
                "mint": USDC_MINT,
                "owner": WALLET_A,
                "tokenAmount": {
                    "amount": str(int(ui_amount * 10**6)),
                    "decimals": 6,
                    "uiAmount": ui_amount,
                    "uiAmountString": str(ui_amount),
                },
            },
        },
        "space": 165,
    }
    return json.dumps({
        "jsonrpc": "2.0",
        "id": 1,
        "result": {
            "context": {"slot": 1},
            "value": [
                keyed(PARSED_ACCOUNT_KEY, parsed),
                keyed(BINARY_ACCOUNT_KEY, ["AAAAAAAAAAA=", "base64"]),
            ],
        },
    })
