"""
Default style schemas for every language.

Each language is described once, as an ordered list of StyleEntry rows.
The color table, both lookup indices and the dispatch style pushes are all
generated from these rows. Row order is the color slot order.

External names follow the Notepad++ stylers.model.xml WordsStyle names.
Style ids follow the Scintilla SCE_* numbering of the tokenizer selected
for the language.
"""

from __future__ import annotations

from lexerstyles.core.models import Language, LanguageSchema, StyleEntry as S


# =============================================================================
# C family (cpp tokenizer)
# =============================================================================

_CPP_ENTRIES = (
    S("Preprocessor", "PREPROCESSOR", "804000", style_ids=(9,)),
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Word", "INSTRUCTION WORD", "0000FF", style_ids=(5,), bold=True),
    S("Word2", "TYPE WORD", "8000FF", style_ids=(16,)),
    S("Number", "NUMBER", "FF8000", style_ids=(4,)),
    S("String", "STRING", "808080", style_ids=(6,)),
    S("Character", "CHARACTER", "808080", style_ids=(7,)),
    S("Operator", "OPERATOR", "000080", style_ids=(10,), bold=True),
    S("Verbatim", "VERBATIM", "000000", style_ids=(13,)),
    S("Regex", "REGEX", "000000", style_ids=(14,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("CommentLine", "COMMENT LINE", "008000", style_ids=(2,)),
    S("CommentDoc", "COMMENT DOC", "008080", style_ids=(3,)),
    S("CommentLineDoc", "COMMENT LINE DOC", "008080", style_ids=(15,)),
    S("CommentDocKeyword", "COMMENT DOC KEYWORD", "008080", style_ids=(17,), bold=True),
    S("CommentDocKeywordError", "COMMENT DOC KEYWORD ERROR", "008080", style_ids=(18,)),
    S("PreprocessorComment", "PREPROCESSOR COMMENT", "008000", style_ids=(23,)),
    S("PreprocessorCommentDoc", "PREPROCESSOR COMMENT DOC", "008080", style_ids=(24,)),
)

_JAVA_ENTRIES = (
    S("Preprocessor", "PREPROCESSOR", "804000", style_ids=(9,)),
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("InstructionWord", "INSTRUCTION WORD", "0000FF", style_ids=(5,), bold=True),
    S("TypeWord", "TYPE WORD", "8000FF", style_ids=(16,)),
    S("Number", "NUMBER", "FF8000", style_ids=(4,)),
    S("String", "STRING", "808080", style_ids=(6,)),
    S("Character", "CHARACTER", "808080", style_ids=(7,)),
    S("Operator", "OPERATOR", "000080", style_ids=(10,), bold=True),
    S("Verbatim", "VERBATIM", "000000", style_ids=(13,)),
    S("Regex", "REGEX", "000000", style_ids=(14,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("CommentLine", "COMMENT LINE", "008000", style_ids=(2,)),
    S("CommentDoc", "COMMENT DOC", "008080", style_ids=(3,)),
    S("CommentLineDoc", "COMMENT LINE DOC", "008080", style_ids=(15,)),
    S("CommentDocKeyword", "COMMENT DOC KEYWORD", "008080", style_ids=(17,), bold=True),
    S("CommentDocKeywordError", "COMMENT DOC KEYWORD ERROR", "008080", style_ids=(18,)),
)

_JAVASCRIPT_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("InstructionWord", "INSTRUCTION WORD", "0000FF", style_ids=(5,), bold=True),
    S("TypeWord", "TYPE WORD", "8000FF", style_ids=(16,)),
    S("WindowInstruction", "WINDOW INSTRUCTION", "804000", style_ids=(19,), bold=True),
    S("Number", "NUMBER", "FF8000", style_ids=(4,)),
    S("String", "STRING", "808080", style_ids=(6,)),
    S("StringRaw", "STRINGRAW", "000080", "C0C0C0", style_ids=(20,)),
    S("Character", "CHARACTER", "808080", style_ids=(7,)),
    S("Operator", "OPERATOR", "000080", style_ids=(10,), bold=True),
    S("Verbatim", "VERBATIM", "000000", style_ids=(13,)),
    S("Regex", "REGEX", "000000", style_ids=(14,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("CommentLine", "COMMENT LINE", "008000", style_ids=(2,)),
    S("CommentDoc", "COMMENT DOC", "008080", style_ids=(3,)),
    S("CommentLineDoc", "COMMENT LINE DOC", "008080", style_ids=(15,)),
    S("CommentDocKeyword", "COMMENT DOC KEYWORD", "008080", style_ids=(17,), bold=True),
    S("CommentDocKeywordError", "COMMENT DOC KEYWORD ERROR", "008080", style_ids=(18,)),
)


# =============================================================================
# Markup
# =============================================================================

_XML_ENTRIES = (
    S("XmlStart", "XMLSTART", "FF0000", "FFFF00", style_ids=(12,)),
    S("XmlEnd", "XMLEND", "FF0000", "FFFF00", style_ids=(13,)),
    S("Default", "DEFAULT", "000000", style_ids=(0,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(9,)),
    S("Number", "NUMBER", "FF0000", style_ids=(5,)),
    S("DoubleString", "DOUBLESTRING", "8000FF", style_ids=(6,), bold=True),
    S("SingleString", "SINGLESTRING", "8000FF", style_ids=(7,), bold=True),
    S("Tag", "TAG", "0000FF", style_ids=(1,)),
    S("TagEnd", "TAGEND", "0000FF", style_ids=(11,)),
    S("TagUnknown", "TAGUNKNOWN", "0000FF", style_ids=(2,)),
    S("Attribute", "ATTRIBUTE", "FF0000", style_ids=(3,)),
    S("AttributeUnknown", "ATTRIBUTEUNKNOWN", "FF0000", style_ids=(4,)),
    S("SgmlDefault", "SGMLDEFAULT", "000000", "A6CAF0", style_ids=(21,)),
    S("CData", "CDATA", "FF8000", style_ids=(17,)),
    S("Entity", "ENTITY", "000000", "FEFDE0", style_ids=(10,), italic=True),
)

_HTML_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(9,)),
    S("Number", "NUMBER", "FF0000", style_ids=(5,)),
    S("DoubleString", "DOUBLESTRING", "8000FF", style_ids=(6,), bold=True),
    S("SingleString", "SINGLESTRING", "8000FF", style_ids=(7,), bold=True),
    S("Tag", "TAG", "0000FF", style_ids=(1,)),
    S("TagEnd", "TAGEND", "0000FF", style_ids=(11,)),
    S("TagUnknown", "TAGUNKNOWN", "000000", style_ids=(2,)),
    S("Attribute", "ATTRIBUTE", "FF0000", style_ids=(3,)),
    S("AttributeUnknown", "ATTRIBUTEUNKNOWN", "000000", style_ids=(4,)),
    S("SGMDefault", "SGMLDEFAULT", "000000", "A6CAF0", style_ids=(21,)),
    S("CData", "CDATA", "FF8000", style_ids=(17,)),
    S("Value", "VALUE", "FF8000", "FEFDE0", style_ids=(19,)),
    S("Entity", "ENTITY", "000000", "FEFDE0", style_ids=(10,), italic=True),
)

# Embedded PHP inside the hypertext tokenizer
_PHP_ENTRIES = (
    S("HQuestion", "QUESTION MARK", "FF0000", "FDF8E3", style_ids=(18,)),
    S("Default", "DEFAULT", "000000", "FEFCF5", style_ids=(118,)),
    S("HString", "STRING", "808080", "FEFCF5", style_ids=(119,)),
    S("HStringVariable", "STRING VARIABLE", "808080", "FEFCF5", style_ids=(126,), bold=True),
    S("SimpleString", "SIMPLESTRING", "808080", "FEFCF5", style_ids=(120,)),
    S("Word", "WORD", "0000FF", "FEFCF5", style_ids=(121,), bold=True),
    S("Number", "NUMBER", "FF8000", "FEFCF5", style_ids=(122,)),
    S("Variable", "VARIABLE", "000080", "FEFCF5", style_ids=(123,)),
    S("Comment", "COMMENT", "008000", "FEFCF5", style_ids=(124,)),
    S("CommentLine", "COMMENTLINE", "008000", "FEFCF5", style_ids=(125,)),
    S("Operator", "OPERATOR", "8000FF", "FEFCF5", style_ids=(127,)),
)

_CSS_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Tag", "TAG", "0000FF", style_ids=(1,)),
    S("Class", "CLASS", "FF0000", style_ids=(2,)),
    S("PseudoClass", "PSEUDOCLASS", "FF8000", style_ids=(3,), bold=True),
    S("UnknownPseudoClass", "UNKNOWN_PSEUDOCLASS", "FF8080", style_ids=(4,)),
    S("Operator", "OPERATOR", "000000", style_ids=(5,), bold=True),
    S("Identifier", "IDENTIFIER", "8080C0", style_ids=(6,), bold=True),
    S("UnknownIdentifier", "UNKNOWN_IDENTIFIER", "000000", style_ids=(7,)),
    S("Value", "VALUE", "000000", style_ids=(8,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(9,)),
    S("Id", "ID", "0080FF", style_ids=(10,), bold=True),
    S("Important", "IMPORTANT", "FF0000", style_ids=(11,), bold=True),
    S("Directive", "DIRECTIVE", "0080FF", style_ids=(12,)),
)


# =============================================================================
# Installers and scripts
# =============================================================================

_NSIS_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Comment", "COMMENTLINE", "008000", style_ids=(1,)),
    S("StringDoubleQuote", "STRING DOUBLE QUOTE", "808080", "EEEEEE", style_ids=(2,)),
    S("StringLeftQuote", "STRING LEFT QUOTE", "000080", "C0C0C0", style_ids=(3,)),
    S("StringRightQuote", "STRING RIGHT QUOTE", "000000", "C0C0C0", style_ids=(4,)),
    S("Function", "FUNCTION", "0000FF", style_ids=(5,)),
    S("Variable", "VARIABLE", "FF8000", style_ids=(6,)),
    S("Label", "LABEL", "FF0000", "FFFF80", style_ids=(7,)),
    S("UserDefined", "USER DEFINED", "FDFFEC", "FF80FF", style_ids=(8,)),
    S("Section", "SECTION", "0000FF", style_ids=(9,), bold=True),
    S("SubSection", "SUBSECTION", "000000", style_ids=(10,), bold=True),
    S("IfDefine", "IF DEFINE", "808040", style_ids=(11,)),
    S("Macro", "MACRO", "800000", style_ids=(12,), bold=True),
    S("StringVar", "STRING VAR", "FF8000", "EFEFEF", style_ids=(13,)),
    S("Number", "NUMBER", "FF0000", style_ids=(14,)),
    S("SectionGroup", "SECTION GROUP", "0000FF", style_ids=(15,), bold=True),
    S("PageEx", "PAGE EX", "0000FF", style_ids=(16,), bold=True),
    S("FunctionDefinitions", "FUNCTION DEFINITIONS", "0000FF", style_ids=(17,), bold=True),
    S("CommentBox", "COMMENT", "008000", style_ids=(18,)),
)

# Shared by Pascal and Inno Setup; Inno Setup is painted with the Pascal numbering
_PASCAL_ENTRIES = (
    S("Default", "DEFAULT", "808080", style_ids=(0,)),
    S("Identifier", "IDENTIFIER", "000000", style_ids=(1,)),
    S("Comment", "COMMENT", "008000", style_ids=(2,)),
    S("Comment2", "COMMENT LINE", "008000", style_ids=(3,)),
    S("CommentLine", "COMMENT DOC", "008080", style_ids=(4,)),
    S("Preprocessor", "PREPROCESSOR", "804000", style_ids=(5,)),
    S("Preprocessor2", "PREPROCESSOR2", "804000", style_ids=(6,)),
    S("Number", "NUMBER", "FF8000", style_ids=(7,)),
    S("HexNumber", "HEX NUMBER", "FF8000", style_ids=(8,)),
    S("Word", "INSTRUCTION WORD", "0000FF", style_ids=(9,), bold=True),
    S("String", "STRING", "808080", style_ids=(10,)),
    S("Character", "CHARACTER", "808080", style_ids=(12,)),
    S("Operator", "OPERATOR", "000080", style_ids=(13,), bold=True),
    S("ForeColor", "ASM", "000000", style_ids=(14,), bold=True),
)

_BATCH_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("Word", "KEYWORDS", "0000FF", style_ids=(2,), bold=True),
    S("Label", "LABEL", "FF0000", "FFFF80", style_ids=(3,), bold=True),
    S("Hide", "HIDE SYBOL", "FF00FF", style_ids=(4,)),
    S("Command", "COMMAND", "0080FF", style_ids=(5,)),
    S("Identifier", "VARIABLE", "FF8000", "FCFFF0", style_ids=(6,), bold=True),
    S("Operator", "OPERATOR", "FF0000", style_ids=(7,), bold=True),
)

_POWERSHELL_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("String", "STRING", "808080", style_ids=(2,)),
    S("Character", "CHARACTER", "808080", style_ids=(3,)),
    S("Number", "NUMBER", "FF8000", style_ids=(4,)),
    S("Variable", "VARIABLE", "000000", style_ids=(5,), bold=True),
    S("Operator", "OPERATOR", "000080", style_ids=(6,), bold=True),
    S("InstructionWord", "INSTRUCTION WORD", "0000FF", style_ids=(8,), bold=True),
    S("Commandlet", "CMDLET", "8000FF", style_ids=(9,)),
    S("Alias", "ALIAS", "0080FF", style_ids=(10,)),
    S("CommentStream", "COMMENT STREAM", "008080", style_ids=(13,)),
    S("HereString", "HERE STRING", "808080", style_ids=(14,)),
    S("HereCharacter", "HERE CHARACTER", "808080", style_ids=(15,)),
    S("CommentDocKeyword", "COMMENT DOC KEYWORD", "008080", style_ids=(16,), bold=True),
)

_VB_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("Number", "NUMBER", "FF0000", style_ids=(2,), bold=True),
    S("Word", "WORD", "0000FF", style_ids=(3,)),
    S("Word2", "WORD2", "0000FF", style_ids=(10,)),
    S("String", "STRING", "808080", style_ids=(4,)),
    S("Preprocessor", "PREPROCESSOR", "FF0000", style_ids=(5,)),
    S("Operator", "OPERATOR", "000000", style_ids=(6,), bold=True),
    S("Date", "DATE", "00FF00", style_ids=(8,)),
)

_PYTHON_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("CommentLine", "COMMENTLINE", "008000", style_ids=(1,)),
    S("Number", "NUMBER", "FF0000", style_ids=(2,)),
    S("String", "STRING", "808080", style_ids=(3,)),
    S("Character", "CHARACTER", "808080", style_ids=(4,)),
    S("Word", "KEYWORDS", "0000FF", style_ids=(5,), bold=True),
    S("Triple", "TRIPLE", "FF8000", style_ids=(6,)),
    S("TripleDouble", "TRIPLEDOUBLE", "FF8000", style_ids=(7,)),
    S("ClassName", "CLASSNAME", "000000", style_ids=(8,), bold=True),
    S("DefName", "DEFNAME", "FF00FF", style_ids=(9,)),
    S("Operator", "OPERATOR", "000080", style_ids=(10,), bold=True),
    S("Identifier", "IDENTIFIER", "000000", style_ids=(11,)),
    S("CommentBlock", "COMMENTBLOCK", "008000", style_ids=(12,)),
    S("Decorator", "DECORATOR", "FF8000", style_ids=(15,), italic=True),
)


# =============================================================================
# Data and settings formats
# =============================================================================

_SQL_ENTRIES = (
    S("Word", "KEYWORD", "0000FF", style_ids=(5,), bold=True),
    S("Number", "NUMBER", "FF8000", style_ids=(4,)),
    S("String", "STRING", "808080", style_ids=(6,)),
    S("Character", "STRING2", "808080", style_ids=(7,)),
    S("Operator", "OPERATOR", "000080", style_ids=(10,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("CommentLine", "COMMENT LINE", "008000", style_ids=(2,)),
)

_INI_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("Section", "SECTION", "8000FF", "F2F4FF", style_ids=(2,), bold=True),
    S("Assignment", "ASSIGNMENT", "FF0000", style_ids=(3,), bold=True),
    S("DefVal", "DEFVAL", "FF0000", style_ids=(4,)),
)

_YAML_ENTRIES = (
    S("Default", "DEFAULT", "000000", style_ids=(0,)),
    S("Identifier", "IDENTIFIER", "000080", style_ids=(2,), bold=True),
    S("Comment", "COMMENT", "008000", style_ids=(1,)),
    S("InstructionWord", "INSTRUCTION WORD", "0000FF", style_ids=(3,), bold=True),
    S("Number", "NUMBER", "FF8040", style_ids=(4,)),
    S("Reference", "REFERENCE", "804000", style_ids=(5,)),
    S("Document", "DOCUMENT", "0000FF", style_ids=(6,)),
    S("Text", "TEXT", "808080", style_ids=(7,), bold=True),
    S("Error", "ERROR", "FF0000", style_ids=(8,)),
    S("Operator", "OPERATOR", "000080", style_ids=(9,)),
)

_JSON_ENTRIES = (
    S("JsonDefault", "DEFAULT", "000000", style_ids=(0,)),
    S("JsonNumber", "NUMBER", "FF8000", style_ids=(1,)),
    S("JsonString", "STRING", "808080", style_ids=(2,)),
    S("JsonUnclosedString", "UNCLOSED STRING", "808080", style_ids=(3,)),
    S("JsonProperty", "PROPERTY NAME", "880AE8", style_ids=(4,)),
    S("JsonEscapeSequence", "ESCAPE SEQUENCE", "A52A2A", style_ids=(5,), bold=True),
    S("JsonLineComment", "LINE COMMENT", "008000", style_ids=(6,)),
    S("JsonBlockComment", "BLOCK COMMENT", "008000", style_ids=(7,)),
    S("JsonOperator", "OPERATOR", "8000FF", style_ids=(8,)),
    S("JsonUri", "URI", "C71585", style_ids=(9,)),
    S("JsonCompactIRI", "JSON-LD COMPACT IRI", "D92299", style_ids=(10,), bold=True),
    S("JsonKeyword", "JSON KEYWORD", "000080", style_ids=(11,)),
    S("JsonLdKeyword", "JSON-LD KEYWORD", "000089", style_ids=(12,)),
    S("JsonError", "PARSING ERROR", "008B8B", "FF45FF", style_ids=(13,)),
)


# =============================================================================
# Error list (compiler and tool output)
# =============================================================================

_ERRORLIST_ENTRIES = (
    S("ErrorListDefault", "DEFAULT", "000000", style_ids=(0,)),
    S("ErrorListPythonError", "PYTHON ERROR", "FF0000", style_ids=(1,)),
    S("ErrorListGccError", "GCC ERROR", "800080", style_ids=(2,)),
    S("ErrorListMicrosoftError", "MICROSOFT ERROR", "808000", style_ids=(3,)),
    S("ErrorListStatus", "COMMAND OR RETURN STATUS", "0000FF", style_ids=(4,)),
    S("ErrorListBorlandError", "BORLAND ERROR AND WARNING MESSAGES", "B06000", style_ids=(5,)),
    S("ErrorListPerlError", "PERL ERROR AND WARNING MESSAGES", "FF0000", style_ids=(6,)),
    S("ErrorListNETTraceBacks", "NET TRACEBACKS", "000000", style_ids=(7,)),
    S("ErrorListLuaError", "LUA ERROR AND WARNING MESSAGES", "FF0000", style_ids=(8,)),
    S("ErrorListCTags", "CTAGS", "FF00FF", style_ids=(9,)),
    S("ErrorListDiffChanged", "DIFF CHANGED", "007F00", style_ids=(10,)),
    S("ErrorListDiffAddition", "DIFF ADDITION", "00007F", style_ids=(11,)),
    S("ErrorListDiffDeletion", "DIFF DELETION", "007F7F", style_ids=(12,)),
    S("ErrorListDiffMessage", "DIFF MESSAGE", "7F0000", style_ids=(13,)),
    S("ErrorListPHPError", "PHP ERROR", "FF0000", style_ids=(14,)),
    S("ErrorListFortran90Error", "ESSENTIAL LAHEY FORTRAN 90 ERROR", "FF0000", style_ids=(15,)),
    S("ErrorListFortranError1", "INTEL FORTRAN COMPILER ERROR", "FF0000", style_ids=(16,)),
    S("ErrorListFortranError2", "INTEL FORTRAN COMPILER V8.0 ERROR/WARNING", "FF0000", style_ids=(17,)),
    S("ErrorListFortranError3", "ABSOFT PRO FORTRAN 90/95 V8.2 ERROR OR WARNING", "FF0000",
      style_ids=(18,)),
    S("ErrorListHTMLTidy", "HTML TIDY", "FF0000", style_ids=(19,)),
    S("ErrorListJREStack", "JAVA RUNTIME STACK TRACE", "FF0000", style_ids=(20,)),
    S("ErrorListGCCTextMatch", "TEXT MATCHED WITH FIND IN FILES AND MESSAGE PART OF GCC ERRORS",
      "000000", style_ids=(21,)),
    S("ErrorListGCCInclude", "GCC SHOWING INCLUDE PATH TO FOLLOWING ERROR", "800080",
      style_ids=(22,)),
    S("ErrorListEscapeSequence", "ESCAPE SEQUENCE", "000000", "FFF7E7", style_ids=(23,)),
    S("ErrorListEscapeSequenceUnknown", "ESCAPE SEQUENCE UNKNOWN", "FFE0A0", "FFF7E7",
      style_ids=(24,)),
    S("ErrorListGCCPointer", "GCC SHOWING EXCERPT OF CODE WITH POINTER", "CF008F", "FFF7E7",
      style_ids=(25,)),
    # No tokenizer style carries this category; kept for persisted documents
    S("ErrorListUnknown1", "UNKNOWN1", "B06000", "FFF7E7"),
    S("ErrorListBasic1", "BASIC1", "000000", "FFF7E7", style_ids=(40,)),
    S("ErrorListBasic2", "BASIC2", "800000", "FFF7E7", style_ids=(41,)),
    S("ErrorListBasic3", "BASIC3", "008000", "FFF7E7", style_ids=(42,)),
    S("ErrorListBasic4", "BASIC4", "808000", "FFF7E7", style_ids=(43,)),
    S("ErrorListBasic5", "BASIC5", "000080", "FFF7E7", style_ids=(44,)),
    S("ErrorListBasic6", "BASIC6", "800080", "FFF7E7", style_ids=(45,)),
    S("ErrorListBasic7", "BASIC7", "008080", "FFF7E7", style_ids=(46,)),
    S("ErrorListBasic8", "BASIC8", "A0A0A0", "FFF7E7", style_ids=(47,)),
    S("ErrorListIntense1", "INTENSE1", "000000", "FFF7E7", style_ids=(48,), bold=True),
    S("ErrorListIntense2", "INTENSE2", "800000", "FFF7E7", style_ids=(49,), bold=True),
    S("ErrorListIntense3", "INTENSE3", "008000", "FFF7E7", style_ids=(50,), bold=True),
    S("ErrorListIntense4", "INTENSE4", "808000", "FFF7E7", style_ids=(51,), bold=True),
    S("ErrorListIntense5", "INTENSE5", "000080", "FFF7E7", style_ids=(52,), bold=True),
    S("ErrorListIntense6", "INTENSE6", "800080", "FFF7E7", style_ids=(53,), bold=True),
    S("ErrorListIntense7", "INTENSE7", "008080", "FFF7E7", style_ids=(54,), bold=True),
    S("ErrorListIntense8", "INTENSE8", "A0A0A0", "FFF7E7", style_ids=(55,), bold=True),
)


# =============================================================================
# Registry
# =============================================================================

DEFAULT_SCHEMAS: dict[Language, LanguageSchema] = {
    schema.language: schema for schema in (
        LanguageSchema(Language.CS, _CPP_ENTRIES),
        LanguageSchema(Language.CPP, _CPP_ENTRIES),
        LanguageSchema(Language.JAVA, _JAVA_ENTRIES),
        LanguageSchema(Language.JAVASCRIPT, _JAVASCRIPT_ENTRIES),
        LanguageSchema(Language.XML, _XML_ENTRIES),
        LanguageSchema(Language.HTML, _HTML_ENTRIES),
        LanguageSchema(Language.PHP, _PHP_ENTRIES),
        LanguageSchema(Language.CSS, _CSS_ENTRIES),
        LanguageSchema(Language.NSIS, _NSIS_ENTRIES),
        LanguageSchema(Language.PASCAL, _PASCAL_ENTRIES),
        LanguageSchema(Language.INNOSETUP, _PASCAL_ENTRIES),
        LanguageSchema(Language.BATCH, _BATCH_ENTRIES),
        LanguageSchema(Language.POWERSHELL, _POWERSHELL_ENTRIES),
        LanguageSchema(Language.VBDOTNET, _VB_ENTRIES),
        LanguageSchema(Language.PYTHON, _PYTHON_ENTRIES),
        LanguageSchema(Language.SQL, _SQL_ENTRIES),
        LanguageSchema(Language.INI, _INI_ENTRIES),
        LanguageSchema(Language.YAML, _YAML_ENTRIES),
        LanguageSchema(Language.JSON, _JSON_ENTRIES),
        LanguageSchema(Language.ERRORLIST, _ERRORLIST_ENTRIES),
    )
}
