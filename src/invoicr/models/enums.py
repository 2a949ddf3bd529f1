"""Énumérations pour la facturation électronique.

FR: Codes pays du registre, identifiants de formats e-facture et codes
    EN16931 (catégories de TVA, unités UN/ECE, moyens de paiement).
EN: Registry country codes, e-invoice format identifiers and EN16931
    code lists (VAT categories, UN/ECE units, payment means).
"""

from enum import StrEnum


class CountryCode(StrEnum):
    """Code pays ISO 3166-1 alpha-2 (pays présents dans le registre).

    FR: Ensemble fermé : un code absent de cette énumération est rejeté
        à la frontière (validation Pydantic ou coerce_country()).
    EN: Closed set: codes outside this enumeration are rejected at the
        boundary (Pydantic validation or coerce_country()).
    """

    # --- Union européenne ---
    DE = "DE"
    RO = "RO"
    FR = "FR"
    IT = "IT"
    ES = "ES"
    PL = "PL"
    BE = "BE"
    NL = "NL"
    AT = "AT"
    PT = "PT"
    SE = "SE"
    NO = "NO"
    DK = "DK"
    FI = "FI"
    GR = "GR"
    HU = "HU"
    SI = "SI"
    SK = "SK"
    CZ = "CZ"
    LU = "LU"
    IE = "IE"
    LT = "LT"
    LV = "LV"
    EE = "EE"
    RS = "RS"
    HR = "HR"
    BG = "BG"
    MT = "MT"
    CY = "CY"

    # --- Europe hors UE ---
    GB = "GB"
    CH = "CH"
    IS = "IS"

    # --- Asie-Pacifique ---
    IN = "IN"
    ID = "ID"
    MY = "MY"
    SG = "SG"
    AU = "AU"
    NZ = "NZ"
    KR = "KR"
    JP = "JP"
    TW = "TW"
    VN = "VN"
    TH = "TH"
    PH = "PH"

    # --- Moyen-Orient ---
    SA = "SA"
    AE = "AE"
    IL = "IL"
    TR = "TR"
    JO = "JO"
    EG = "EG"

    # --- Amérique latine ---
    BR = "BR"
    MX = "MX"
    AR = "AR"
    CL = "CL"
    CO = "CO"
    PE = "PE"
    EC = "EC"
    CR = "CR"
    UY = "UY"
    PA = "PA"
    GT = "GT"
    DO = "DO"
    BO = "BO"

    # --- Afrique ---
    ZA = "ZA"
    KE = "KE"
    NG = "NG"
    GH = "GH"
    TZ = "TZ"
    RW = "RW"

    # --- Amérique du Nord ---
    US = "US"
    CA = "CA"


class FormatId(StrEnum):
    """Identifiant de format de facture électronique.

    FR: Ensemble fermé. Ajouter un format implique d'ajouter un membre ici,
        une entrée dans le registre et une règle dans le validateur.
    EN: Closed set. Adding a format means adding a member here, a registry
        entry and a validator rule.
    """

    # --- Europe ---
    XRECHNUNG = "xrechnung"
    """Allemagne : XML UBL, obligatoire B2G / Germany: UBL XML for B2G"""

    ZUGFERD = "zugferd"
    """Allemagne, Autriche, Suisse : PDF/A-3 + XML / PDF/A-3 with embedded XML"""

    CIUS_RO = "cius-ro"
    """Roumanie : UBL avec exigences ANAF / Romania: UBL with ANAF rules"""

    UBL = "ubl"
    """UBL 2.1 générique / Generic UBL 2.1"""

    FACTUR_X = "factur-x"
    """France : PDF/A-3 + XML CII / France: PDF/A-3 with CII XML"""

    FATTURAPA = "fatturapa"
    """Italie : XML pour le SDI / Italy: XML for SDI"""

    FACTURAE = "facturae"
    """Espagne : Facturae 3.2.2 / Spain: Facturae 3.2.2"""

    PEPPOL_BIS = "peppol-bis"
    """PEPPOL BIS Billing 3.0"""

    NLCIUS = "nlcius"
    """Pays-Bas : NLCIUS / Netherlands: NLCIUS"""

    EHF = "ehf"
    """Norvège : Elektronisk Handelsformat / Norway: EHF"""

    OIOUBL = "oioubl"
    """Danemark : OIOUBL / Denmark: OIOUBL"""

    FINVOICE = "finvoice"
    """Finlande : Finvoice 3.0 / Finland: Finvoice 3.0"""

    EBINTERFACE = "ebinterface"
    """Autriche : ebInterface 6.1 / Austria: ebInterface 6.1"""

    ISDOC = "isdoc"
    """République tchèque : ISDOC / Czech Republic: ISDOC"""

    KSEF = "ksef"
    """Pologne : Krajowy System e-Faktur / Poland: KSeF"""

    SEFAKTURA = "sefaktura"
    """Serbie : e-Faktura / Serbia: e-Faktura"""

    # --- Afrique ---
    TIMS = "tims"
    EVAT_GH = "evat-gh"
    EFD_TZ = "efd-tz"
    EBM = "ebm"

    # --- Asie-Pacifique ---
    GST_EINVOICE = "gst-einvoice"
    EFAKTUR = "efaktur"
    MYINVOIS = "myinvois"
    PEPPOL_SG = "peppol-sg"
    PEPPOL_ANZ = "peppol-anz"
    ETAX_KR = "etax-kr"
    PEPPOL_JP = "peppol-jp"
    EGUI = "egui"
    VAT_VN = "vat-vn"
    ETAX_TH = "etax-th"
    CAS_PH = "cas-ph"

    # --- Moyen-Orient ---
    FATOORA = "fatoora"
    EFATURA_TR = "efatura-tr"
    JOFOTARA = "jofotara"
    ERECEIPT_EG = "ereceipt-eg"

    # --- Amérique latine ---
    NFE = "nfe"
    CFDI = "cfdi"
    FE_AR = "fe-ar"
    DTE = "dte"
    FE_CO = "fe-co"
    FE_PE = "fe-pe"
    FE_EC = "fe-ec"
    FE_CR = "fe-cr"
    CFE = "cfe"
    FE_PA = "fe-pa"
    FEL = "fel"
    ECF = "ecf"
    FE_BO = "fe-bo"


class Language(StrEnum):
    """Langue de la facture (détermine le format des dates)."""

    DE = "de"
    """Allemand : dates DD.MM.YYYY / German: DD.MM.YYYY dates"""

    EN = "en"
    """Anglais : dates D MMM YYYY / English: D MMM YYYY dates"""


class BillingType(StrEnum):
    """Type de facturation d'une ligne de service."""

    HOURLY = "hourly"
    """À l'heure / Hourly"""

    DAILY = "daily"
    """À la journée / Daily"""

    FIXED = "fixed"
    """Forfait / Fixed price"""


class InvoiceTypeCode(StrEnum):
    """Code du type de facture (UNTDID 1001)."""

    INVOICE = "380"
    """Facture commerciale / Commercial invoice"""


class VATCategory(StrEnum):
    """Catégorie de TVA (UNTDID 5305).

    FR: Seules les catégories dérivables d'un taux unique sont utilisées.
    EN: Only the categories derivable from a single flat rate are used.
    """

    STANDARD = "S"
    """Taux normal / Standard rate"""

    EXEMPT = "E"
    """Exonéré / Exempt"""

    NOT_SUBJECT = "O"
    """Non soumis / Not subject to VAT"""


class UnitCode(StrEnum):
    """Code unité de mesure (UN/ECE Rec. 20)."""

    UNIT = "C62"
    """Unité / One (unit)"""

    HOUR = "HUR"
    """Heure / Hour"""

    DAY = "DAY"
    """Jour / Day"""


class PaymentMeansCode(StrEnum):
    """Code moyen de paiement (UNTDID 4461)."""

    SEPA_CREDIT_TRANSFER = "58"
    """Virement SEPA / SEPA credit transfer"""
