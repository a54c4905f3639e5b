"""
Default keyword word lists.

Pure data: one space separated string per surface keyword bucket.
"""

CS_KEYWORDS = (
    "abstract add alias as ascending async await base break case catch checked "
    "continue default delegate descending do dynamic else event explicit extern "
    "false finally fixed for foreach from get global goto group if implicit in "
    "interface internal into is join let lock namespace new null object operator "
    "orderby out override params partial private protected public readonly ref "
    "remove return sealed select set sizeof stackalloc switch this throw true "
    "try typeof unchecked unsafe using value virtual where while yield"
)

CS_TYPE_WORDS = (
    "bool byte char class const decimal double enum float int long sbyte short "
    "static string struct uint ulong ushort var void"
)

CPP_KEYWORDS = (
    "alignof and and_eq bitand bitor break case catch compl const_cast continue "
    "default delete do dynamic_cast else false for goto if namespace new not "
    "not_eq nullptr operator or or_eq reinterpret_cast return sizeof "
    "static_assert static_cast switch this throw true try typedef typeid using "
    "while xor xor_eq NULL"
)

CPP_TYPE_WORDS = (
    "alignas asm auto bool char char16_t char32_t class clock_t const constexpr "
    "decltype double enum explicit export extern final float friend inline int "
    "int8_t int16_t int32_t int64_t int_fast8_t int_fast16_t int_fast32_t "
    "int_fast64_t intmax_t intptr_t long mutable noexcept override private "
    "protected ptrdiff_t public register short signed size_t ssize_t static "
    "struct template thread_local time_t typename uint8_t uint16_t uint32_t "
    "uint64_t uint_fast8_t uint_fast16_t uint_fast32_t uint_fast64_t uintmax_t "
    "uintptr_t union unsigned virtual void volatile wchar_t"
)

CPP_DOC_KEYWORDS = (
    "a addindex addtogroup anchor arg attention author authors b brief bug c "
    "callergraph callgraph category cite class code cond copybrief copydetails "
    "copydoc copyright date def defgroup deprecated details diafile dir "
    "docbookonly dontinclude dot dotfile e else elseif em endcode endcond "
    "enddocbookonly enddot endhtmlonly endif endinternal endlatexonly endlink "
    "endmanonly endmsc endparblock endrtfonly endsecreflist enduml endverbatim "
    "endxmlonly enum example exception extends f$ f[ f] file fn f{ f} headerfile "
    "hidecallergraph hidecallgraph hideinitializer htmlinclude htmlonly "
    "idlexcept if ifnot image implements include includelineno ingroup interface "
    "internal invariant latexinclude latexonly li line link mainpage manonly "
    "memberof msc mscfile n name namespace nosubgrouping note overload p package "
    "page par paragraph param parblock post pre private privatesection property "
    "protected protectedsection protocol public publicsection pure ref refitem "
    "related relatedalso relates relatesalso remark remarks result return "
    "returns retval rtfonly sa secreflist section see short showinitializer "
    "since skip skipline snippet startuml struct subpage subsection "
    "subsubsection tableofcontents test throw throws todo tparam typedef union "
    "until var verbatim verbinclude version vhdlflow warning weakgroup xmlonly "
    "xrefitem"
)

NSIS_FUNCTIONS = (
    "Abort AddBrandingImage AddSize AllowRootDirInstall AllowSkipFiles "
    "AutoCloseWindow BGFont BGGradient BrandingText BringToFront Call "
    "CallInstDLL Caption ChangeUI CheckBitmap ClearErrors CompletedText "
    "ComponentText CopyFiles CRCCheck CreateDirectory CreateFont CreateShortCut "
    "Delete DeleteINISec DeleteINIStr DeleteRegKey DeleteRegValue DetailPrint "
    "DetailsButtonText DirText DirVar DirVerify EnableWindow EnumRegKey "
    "EnumRegValue Exch Exec ExecShell ExecWait ExpandEnvStrings File FileBufSize "
    "FileClose FileErrorText FileOpen FileRead FileReadByte FileReadUTF16LE "
    "FileSeek FileWrite FileWriteByte FileWriteUTF16LE FindClose FindFirst "
    "FindNext FindWindow FlushINI Function FunctionEnd GetCurInstType "
    "GetCurrentAddress GetDlgItem GetDLLVersion GetDLLVersionLocal GetErrorLevel "
    "GetExeName GetExePath GetFileTime GetFileTimeLocal GetFullPathName "
    "GetFunctionAddress GetInstDirError GetLabelAddress GetTempFileName Goto "
    "HideWindow Icon IfAbort IfErrors IfFileExists IfRebootFlag IfSilent "
    "InitPluginsDir InstallButtonText InstallColors InstallDir InstallDirRegKey "
    "InstProgressFlags InstType InstTypeGetText InstTypeSetText IntCmp IntCmpU "
    "IntFmt IntOp IsWindow LangString LangStringUP LicenseBkColor LicenseData "
    "LicenseForceSelection LicenseLangString LicenseText LoadLanguageFile "
    "LockWindow LogSet LogText ManifestDPIAware ManifestSupportedOS MessageBox "
    "MiscButtonText Nop Name OutFile Page PageEx PageExEnd PluginDir Pop Push "
    "Quit ReadEnvStr ReadINIStr ReadRegDWORD ReadRegStr Reboot RegDLL Rename "
    "RequestExecutionLevel ReserveFile Return RMDir SearchPath Section "
    "SectionEnd SectionGetFlags SectionGetInstTypes SectionGetSize "
    "SectionGetText SectionGroup SectionGroupEnd SectionIn SectionSetFlags "
    "SectionSetInstTypes SectionSetSize SectionSetText SendMessage SetAutoClose "
    "SetBrandingImage SetCompress SetCompressionLevel SetCompressor "
    "SetCompressorDictSize SetCtlColors SetCurInstType SetDatablockOptimize "
    "SetDateSave SetDetailsPrint SetDetailsView SetErrorLevel SetErrors "
    "SetFileAttributes SetFont SetOutPath SetOverwrite SetPluginUnload "
    "SetRebootFlag SetRegView SetShellVarContext SetSilent SetStaticBkColor "
    "ShowInstDetails ShowUninstDetails ShowWindow SilentInstall SilentUnInstall "
    "Sleep SpaceTexts StrCmp StrCmpS StrCpy StrLen SubSection SubSectionEnd "
    "Unicode UninstallButtonText UninstallCaption UninstallIcon "
    "UninstallSubCaption UninstallText UninstPage UnRegDLL UnsafeStrCpy Var "
    "VIAddVersionKey VIFileVersion VIProductVersion WindowIcon WriteINIStr "
    "WriteRegBin WriteRegDWORD WriteRegExpandStr WriteRegStr WriteUninstaller "
    "XPStyle !AddIncludeDir !AddPluginDir !appendfile !cd !define !delfile !echo "
    "!else !endif !error !execute !finalize !getdllversion !if !ifdef "
    "!ifmacrodef !ifmacrondef !ifndef !include !insertmacro !macro !macroend "
    "!macroundef !packhdr !searchparse !searchreplace !system !tempfile !undef "
    "!verbose !warning"
)

NSIS_VARIABLES = (
    "$0 $1 $2 $3 $4 $5 $6 $7 $8 $9 $R0 $R1 $R2 $R3 $R4 $R5 $R6 $R7 $R8 $R9 "
    "$ADMINTOOLS $APPDATA $CDBURN_AREA $CMDLINE $COMMONFILES $COMMONFILES32 "
    "$COMMONFILES64 $COOKIES $DESKTOP $DOCUMENTS $EXEDIR $EXEFILE $EXEPATH "
    "$FAVORITES $FONTS $HISTORY $HWNDPARENT $INTERNET_CACHE $INSTDIR $LANGUAGE "
    "$LOCALAPPDATA $MUSIC $NETHOOD ${NSISDIR} $OUTDIR $PICTURES $PLUGINSDIR "
    "$PRINTHOOD $PROFILE $PROGRAMFILES $PROGRAMFILES32 $PROGRAMFILES64 "
    "$QUICKLAUNCH $RECENT $RESOURCES $RESOURCES_LOCALIZED $SENDTO $SMPROGRAMS "
    "$SMSTARTUP $STARTMENU $SYSDIR $TEMP $TEMPLATES $VIDEOS $WINDIR $$ $\\n $\\r "
    "$\\t"
)

NSIS_LUMP = (
    "ARCHIVE CUR END FILE_ATTRIBUTE_ARCHIVE FILE_ATTRIBUTE_HIDDEN "
    "FILE_ATTRIBUTE_NORMAL FILE_ATTRIBUTE_OFFLINE FILE_ATTRIBUTE_READONLY "
    "FILE_ATTRIBUTE_SYSTEM FILE_ATTRIBUTE_TEMPORARY HIDDEN HKCC HKCR HKCU HKDD "
    "HKEY_CLASSES_ROOT HKEY_CURRENT_CONFIG HKEY_CURRENT_USER HKEY_DYN_DATA "
    "HKEY_LOCAL_MACHINE HKEY_PERFORMANCE_DATA HKEY_USERS HKLM HKPD HKU IDABORT "
    "IDCANCEL IDIGNORE IDNO IDOK IDRETRY IDYES MB_ABORTRETRYIGNORE MB_DEFBUTTON1 "
    "MB_DEFBUTTON2 MB_DEFBUTTON3 MB_DEFBUTTON4 MB_ICONEXCLAMATION "
    "MB_ICONINFORMATION MB_ICONQUESTION MB_ICONSTOP MB_OK MB_OKCANCEL "
    "MB_RETRYCANCEL MB_RIGHT MB_SETFOREGROUND MB_TOPMOST MB_USERICON MB_YESNO "
    "MB_YESNOCANCEL NORMAL OFFLINE READONLY SET SHCTX SW_HIDE SW_SHOWMAXIMIZED "
    "SW_SHOWMINIMIZED SW_SHOWNORMAL SYSTEM TEMPORARY all auto both bottom bzip2 "
    "checkbox colored current false force hide ifdiff ifnewer lastused leave "
    "left listonly lzma nevershow none normal off on pop push radiobuttons right "
    "show silent silentlog smooth textonly top true try zlib"
)

SQL_KEYWORDS = (
    "abs absolute access acos add add_months adddate admin after aggregate all "
    "allocate alter and any app_name are array as asc ascii asin assertion at "
    "atan atn2 audit authid authorization autonomous_transaction avg before "
    "begin benchmark between bfilename bigint bin binary binary_checksum "
    "binary_integer bit bit_count bit_and bit_or blob body boolean both breadth "
    "bulk by call cascade cascaded case cast catalog ceil ceiling char char_base "
    "character charindex chartorowid check checksum checksum_agg chr class clob "
    "close cluster coalesce col_length col_name collate collation collect column "
    "comment commit completion compress concat concat_ws connect connection "
    "constant constraint constraints constructorcreate contains containsable "
    "continue conv convert corr corresponding cos cot count count_big covar_pop "
    "covar_samp create cross cube cume_dist current current_date current_path "
    "current_role current_time current_timestamp current_user currval cursor "
    "cycle data datalength databasepropertyex date date_add date_format date_sub "
    "dateadd datediff datename datepart datetime day db_id db_name deallocate "
    "dec declare decimal decode default deferrable deferred degrees delete "
    "dense_rank depth deref desc describe descriptor destroy destructor "
    "deterministic diagnostics dictionary disconnect difference distinct do "
    "domain double drop dump dynamic each else elsif empth encode encrypt end "
    "end-exec equals escape every except exception exclusive exec execute exists "
    "exit exp export_set extends external extract false fetch first first_value "
    "file float floor file_id file_name filegroup_id filegroup_name "
    "filegroupproperty fileproperty for forall foreign format formatmessage "
    "found freetexttable from from_days fulltextcatalog fulltextservice function "
    "general get get_lock getdate getansinull getutcdate global go goto grant "
    "greatest group grouping having heap hex hextoraw host host_id host_name "
    "hour ident_incr ident_seed ident_current identified identity if ifnull "
    "ignore immediate in increment index index_col indexproperty indicator "
    "initcap initial initialize initially inner inout input insert instr instrb "
    "int integer interface intersect interval into is is_member is_srvrolemember "
    "is_null is_numeric isdate isnull isolation iterate java join key lag "
    "language large last last_day last_value lateral lcase lead leading least "
    "left len length lengthb less level like limit limited ln lpad local "
    "localtime localtimestamp locator lock log log10 long loop lower ltrim "
    "make_ref map match max maxextents merge mid min minus minute mlslabel mod "
    "mode modifies modify module month months_between names national natural "
    "naturaln nchar nclob new new_time newid next next_day nextval no noaudit "
    "nocompress nocopy none not nowait null nullif number number_base numeric "
    "nvl nvl2 nvarchar object object_id object_name object_property ocirowid oct "
    "of off offline old on online only opaque open operator operation option or "
    "ord order ordinalityorganization others out outer output package pad "
    "parameter parameters partial partition path pctfree percent_rank pi "
    "pls_integer positive positiven postfix pow power pragma precision prefix "
    "preorder prepare preserve primary prior private privileges procedure public "
    "radians raise rand range rank ratio_to_export raw rawtohex read reads real "
    "record recursive ref references referencing reftohex relative release "
    "release_lock rename repeat replace resource restrict result return returns "
    "reverse revoke right rollback rollup round routine row row_number rowid "
    "rowidtochar rowlabel rownum rows rowtype rpad rtrim savepoint schema scroll "
    "scope search second section seddev_samp select separate sequence session "
    "session_user set sets share sign sin sinh size smallint some soundex space "
    "specific specifictype sql sqlcode sqlerrm sqlexception sqlstate sqlwarning "
    "sqrt start state statement static std stddev stdev_pop strcmp structure "
    "subdate substr substrb substring substring_index subtype successful sum "
    "synonym sys_context sys_guid sysdate system_user table tan tanh temporary "
    "terminate than then time timestamp timezone_abbr timezone_minute "
    "timezone_hour timezone_region tinyint to to_char to_date to_days to_number "
    "to_single_byte trailing transaction translate translation treat trigger "
    "trim true trunc truncate type ucase uid under union unique uniqueidentifier "
    "unknown unnest update upper usage use user userenv using validate value "
    "values var_pop var_samp varbinary varchar varchar2 variable variance "
    "varying view vsize when whenever where with without while work write year "
    "zone autoincrement"
)

BATCH_KEYWORDS = (
    "assoc aux break call cd chcp chdir choice cls cmdextversion color com com1 "
    "com2 com3 com4 con copy country ctty date defined del dir do dpath echo "
    "else endlocal erase errorlevel exist exit for ftype goto if in loadfix "
    "loadhigh lpt lpt1 lpt2 lpt3 lpt4 md mkdir move not nul path pause popd prn "
    "prompt pushd rd rem ren rename rmdir set setlocal shift start time title "
    "type ver verify vol"
)

PASCAL_KEYWORDS = (
    "and array asm begin case cdecl class const constructor default destructor "
    "div do downto else end end. except exit exports external far file "
    "finalization finally for function goto if implementation in index inherited "
    "initialization inline interface label library message mod near nil not "
    "object of on or out overload override packed pascal private procedure "
    "program property protected public published raise read record register "
    "repeat resourcestring safecall set shl shr stdcall stored string then "
    "threadvar to try type unit until uses var virtual while with write xor"
)

HTML_KEYWORDS = (
    "!doctype a abbr accept accept-charset accesskey acronym action address "
    "align alink alt applet archive area article aside async audio autocomplete "
    "autofocus axis b background base basefont bdi bdo bgcolor bgsound big blink "
    "blockquote body border br button canvas caption cellpadding cellspacing "
    "center char charoff charset checkbox checked cite class classid clear code "
    "codebase codetype col colgroup color cols colspan command compact content "
    "contenteditable contextmenu coords data datafld dataformatas datalist "
    "datapagesize datasrc datetime dd declare defer del details dfn dialog dir "
    "disabled div dl draggable dropzone dt element em embed enctype event face "
    "fieldset figcaption figure file font footer for form formaction formenctype "
    "formmethod formnovalidate formtarget frame frameborder frameset h1 h2 h3 h4 "
    "h5 h6 head header headers height hgroup hidden hr href hreflang hspace html "
    "http-equiv i id iframe image img input ins isindex ismap kbd keygen label "
    "lang language leftmargin legend li link list listing longdesc main manifest "
    "map marginheight marginwidth mark marquee max maxlength media menu menuitem "
    "meta meter method min multicol multiple name nav nobr noembed noframes "
    "nohref noresize noscript noshade novalidate nowrap object ol onabort "
    "onafterprint onautocomplete onautocompleteerror onbeforeonload "
    "onbeforeprint onblur oncancel oncanplay oncanplaythrough onchange onclick "
    "onclose oncontextmenu oncuechange ondblclick ondrag ondragend ondragenter "
    "ondragleave ondragover ondragstart ondrop ondurationchange onemptied "
    "onended onerror onfocus onhashchange oninput oninvalid onkeydown onkeypress "
    "onkeyup onload onloadeddata onloadedmetadata onloadstart onmessage "
    "onmousedown onmouseenter onmouseleave onmousemove onmouseout onmouseover "
    "onmouseup onmousewheel onoffline ononline onpagehide onpageshow onpause "
    "onplay onplaying onpointercancel onpointerdown onpointerenter "
    "onpointerleave onpointerlockchange onpointerlockerror onpointermove "
    "onpointerout onpointerover onpointerup onpopstate onprogress onratechange "
    "onreadystatechange onredo onreset onresize onscroll onseeked onseeking "
    "onselect onshow onsort onstalled onstorage onsubmit onsuspend ontimeupdate "
    "ontoggle onundo onunload onvolumechange onwaiting optgroup option output p "
    "param password pattern picture placeholder plaintext pre profile progress "
    "prompt public q radio readonly rel required reset rev reversed role rows "
    "rowspan rp rt rtc ruby rules s samp sandbox scheme scope scoped script "
    "seamless section select selected shadow shape size sizes small source "
    "spacer span spellcheck src srcdoc standby start step strike strong style "
    "sub submit summary sup svg svg:svg tabindex table target tbody td template "
    "text textarea tfoot th thead time title topmargin tr track tt type u ul "
    "usemap valign value valuetype var version video vlink vspace wbr width xml "
    "xmlns xmp"
)

PHP_KEYWORDS = (
    "__class__ __dir__ __file__ __function__ __halt_compiler __line__ "
    "__method__ __namespace__ __trait__ abstract and array as break callable "
    "case catch class clone const continue declare default die do echo else "
    "elseif empty enddeclare endfor endforeach endif endswitch endwhile enum "
    "eval exit extends false final finally fn for foreach function global goto "
    "if implements include include_once instanceof insteadof interface isset "
    "list match namespace new null or print private protected public readonly "
    "require require_once return static switch throw trait true try unset use "
    "var while xor yield"
)

POWERSHELL_KEYWORDS = (
    "begin break catch class continue data define do dynamicparam else elseif "
    "end enum exit filter finally for foreach from function hidden if in "
    "inlinescript parallel param process return sequence static switch throw "
    "trap try until using var while workflow"
)

POWERSHELL_CMDLETS = (
    "add-content add-member clear-host compare-object convertfrom-json "
    "convertto-json copy-item export-csv foreach-object format-list "
    "format-table get-childitem get-command get-content get-date get-help "
    "get-item get-location get-member get-process get-service import-csv "
    "import-module invoke-command invoke-expression invoke-webrequest "
    "measure-object move-item new-item new-object out-file out-null "
    "read-host remove-item rename-item select-object select-string "
    "set-content set-item set-location set-variable sort-object split-path "
    "start-process start-sleep test-path where-object write-error write-host "
    "write-output write-verbose write-warning"
)

POWERSHELL_ALIASES = (
    "ac cat cd chdir clear cls copy cp cpi del diff dir echo erase fl foreach "
    "ft gc gci gcm gi gl gm gps gsv h history iex ipcsv ise iwr kill ls man md "
    "mi mkdir move mv ni popd ps pushd pwd r rd ren ri rm rmdir sc select set "
    "sl sleep sort sp start tee type where wget write"
)

YAML_KEYWORDS = "true false yes no on off null"

JAVA_KEYWORDS = (
    "abstract assert break case catch class const continue default do else "
    "enum extends final finally for goto if implements import instanceof "
    "interface native new non-sealed package permits private protected public "
    "record return sealed static strictfp super switch synchronized this "
    "throw throws transient try var void volatile while yield true false null"
)

JAVA_TYPE_WORDS = (
    "boolean byte char double float int long short Boolean Byte Character "
    "Double Float Integer Long Object Short String StringBuilder Void"
)

JAVASCRIPT_KEYWORDS = (
    "abstract async await boolean break byte case catch char class const "
    "continue debugger default delete do double else enum export extends "
    "false final finally float for function goto if implements import in "
    "instanceof int interface let long native new null of package private "
    "protected public return short static super switch synchronized this "
    "throw throws transient true try typeof undefined var void volatile "
    "while with yield"
)

JAVASCRIPT_GLOBALS = (
    "Array Boolean Date Error Function Infinity JSON Map Math NaN Number "
    "Object Promise Proxy Reflect RegExp Set String Symbol WeakMap WeakSet "
    "console document globalThis localStorage navigator window"
)

CSS_PROPERTIES = (
    "align-content align-items align-self animation background "
    "background-color background-image background-position background-repeat "
    "background-size border border-bottom border-collapse border-color "
    "border-left border-radius border-right border-style border-top "
    "border-width bottom box-shadow box-sizing clear color content cursor "
    "display flex flex-basis flex-direction flex-grow flex-shrink flex-wrap "
    "float font font-family font-size font-style font-weight gap grid "
    "grid-area grid-column grid-row grid-template-columns grid-template-rows "
    "height justify-content left letter-spacing line-height list-style margin "
    "margin-bottom margin-left margin-right margin-top max-height max-width "
    "min-height min-width opacity outline overflow overflow-x overflow-y "
    "padding padding-bottom padding-left padding-right padding-top position "
    "right text-align text-decoration text-indent text-overflow text-shadow "
    "text-transform top transform transition vertical-align visibility "
    "white-space width word-break word-spacing word-wrap z-index"
)

CSS_PSEUDO_CLASSES = (
    "active after before checked default disabled empty enabled first "
    "first-child first-letter first-line first-of-type focus focus-visible "
    "focus-within hover in-range indeterminate invalid lang last-child "
    "last-of-type link not nth-child nth-last-child nth-last-of-type "
    "nth-of-type only-child only-of-type optional out-of-range read-only "
    "read-write required root target valid visited"
)

VB_KEYWORDS = (
    "addhandler addressof alias and andalso as boolean byref byte byval call "
    "case catch cbool cbyte cchar cdate cdbl cdec char cint class clng cobj "
    "const continue csbyte cshort csng cstr ctype cuint culng cushort date "
    "decimal declare default delegate dim directcast do double each else "
    "elseif end endif enum erase error event exit false finally for friend "
    "function get gettype global goto handles if implements imports in "
    "inherits integer interface is isnot let lib like long loop me mod module "
    "mustinherit mustoverride mybase myclass namespace narrowing new next not "
    "nothing notinheritable notoverridable object of on operator option "
    "optional or orelse overloads overridable overrides paramarray partial "
    "private property protected public raiseevent readonly redim rem "
    "removehandler resume return sbyte select set shadows shared short single "
    "static step stop string structure sub synclock then throw to true try "
    "trycast typeof uinteger ulong ushort using variant wend when while "
    "widening with withevents writeonly xor"
)

JSON_KEYWORDS = "false null true"

JSON_LD_KEYWORDS = (
    "@base @container @context @direction @graph @id @import @included "
    "@index @json @language @list @nest @none @prefix @propagate @protected "
    "@reverse @set @type @value @version @vocab"
)

PYTHON_KEYWORDS = (
    "False None True _ and as assert async await break case class continue def "
    "del elif else except finally for from global if import in is lambda match "
    "nonlocal not or pass raise return try type while with yield"
)

PYTHON_BUILTINS = (
    "ArithmeticError AssertionError AttributeError BaseException "
    "BaseExceptionGroup BlockingIOError BrokenPipeError BufferError BytesWarning "
    "ChildProcessError ConnectionAbortedError ConnectionError "
    "ConnectionRefusedError ConnectionResetError DeprecationWarning EOFError "
    "Ellipsis EncodingWarning EnvironmentError Exception ExceptionGroup "
    "FileExistsError FileNotFoundError FloatingPointError FutureWarning "
    "GeneratorExit IOError ImportError ImportWarning IndentationError IndexError "
    "InterruptedError IsADirectoryError KeyError KeyboardInterrupt LookupError "
    "MemoryError ModuleNotFoundError NameError NotADirectoryError NotImplemented "
    "NotImplementedError OSError OverflowError PendingDeprecationWarning "
    "PermissionError ProcessLookupError RecursionError ReferenceError "
    "ResourceWarning RuntimeError RuntimeWarning StopAsyncIteration "
    "StopIteration SyntaxError SyntaxWarning SystemError SystemExit TabError "
    "TimeoutError TypeError UnboundLocalError UnicodeDecodeError "
    "UnicodeEncodeError UnicodeError UnicodeTranslateError UnicodeWarning "
    "UserWarning ValueError Warning ZeroDivisionError abs aiter all anext any "
    "ascii bin bool breakpoint bytearray bytes callable chr classmethod compile "
    "complex copyright credits delattr dict dir divmod enumerate eval exec exit "
    "filter float format frozenset getattr globals hasattr hash help hex id "
    "input int isinstance issubclass iter len license list locals map max "
    "memoryview min next object oct open ord pow print property quit range repr "
    "reversed round set setattr slice sorted staticmethod str sum super tuple "
    "type vars zip"
)

