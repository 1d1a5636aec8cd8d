"""Barcode symbologies known to the upstream layout engine."""

from __future__ import annotations

from enum import IntEnum


class Symbology(IntEnum):
    """Symbology identifiers, numbered as the layout engine numbers them."""

    CODE11 = 1
    C25STANDARD = 2
    C25INTER = 3
    C25IATA = 4
    C25LOGIC = 6
    C25IND = 7
    CODE39 = 8
    EXCODE39 = 9
    EANX = 13
    EANX_CHK = 14
    GS1_128 = 16
    CODABAR = 18
    CODE128 = 20
    DPLEIT = 21
    DPIDENT = 22
    CODE16K = 23
    CODE49 = 24
    CODE93 = 25
    FLAT = 28
    DBAR_OMN = 29
    DBAR_LTD = 30
    DBAR_EXP = 31
    TELEPEN = 32
    UPCA = 34
    UPCA_CHK = 35
    UPCE = 37
    UPCE_CHK = 38
    POSTNET = 40
    MSI_PLESSEY = 47
    FIM = 49
    LOGMARS = 50
    PHARMA = 51
    PZN = 52
    PHARMA_TWO = 53
    CEPNET = 54
    PDF417 = 55
    PDF417COMP = 56
    MAXICODE = 57
    QRCODE = 58
    CODE128AB = 60
    AUSPOST = 63
    AUSREPLY = 66
    AUSROUTE = 67
    AUSREDIRECT = 68
    ISBNX = 69
    RM4SCC = 70
    DATAMATRIX = 71
    EAN14 = 72
    VIN = 73
    CODABLOCKF = 74
    NVE18 = 75
    JAPANPOST = 76
    KOREAPOST = 77
    DBAR_STK = 79
    DBAR_OMNSTK = 80
    DBAR_EXPSTK = 81
    PLANET = 82
    MICROPDF417 = 84
    USPS_IMAIL = 85
    PLESSEY = 86
    TELEPEN_NUM = 87
    ITF14 = 89
    KIX = 90
    AZTEC = 92
    DAFT = 93
    DPD = 96
    MICROQR = 97
    HIBC_128 = 98
    HIBC_39 = 99
    HIBC_DM = 102
    HIBC_QR = 104
    HIBC_PDF = 106
    HIBC_MICPDF = 108
    HIBC_BLOCKF = 110
    HIBC_AZTEC = 112
    DOTCODE = 115
    HANXIN = 116
    MAILMARK_2D = 119
    UPU_S10 = 120
    MAILMARK_4S = 121
    AZRUNE = 128
    CODE32 = 129
    EANX_CC = 130
    GS1_128_CC = 131
    DBAR_OMN_CC = 132
    DBAR_LTD_CC = 133
    DBAR_EXP_CC = 134
    UPCA_CC = 135
    UPCE_CC = 136
    DBAR_STK_CC = 137
    DBAR_OMNSTK_CC = 138
    DBAR_EXPSTK_CC = 139
    CHANNEL = 140
    CODEONE = 141
    GRIDMATRIX = 142
    UPNQR = 143
    ULTRA = 144
    RMQR = 145
    BC412 = 146


_UPCEAN = frozenset({
    Symbology.EANX,
    Symbology.EANX_CHK,
    Symbology.UPCA,
    Symbology.UPCA_CHK,
    Symbology.UPCE,
    Symbology.UPCE_CHK,
    Symbology.ISBNX,
    Symbology.EANX_CC,
    Symbology.UPCA_CC,
    Symbology.UPCE_CC,
})


def is_upcean(symbology: Symbology | int) -> bool:
    """Whether the symbology belongs to the UPC/EAN family.

    UPC/EAN symbols print their human-readable text in OCR-B and never bold.
    """
    return symbology in _UPCEAN
