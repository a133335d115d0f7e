"""Code point to LaTeX escape sequence table.

Characters missing from the table are left unchanged by the escaper. ``{``,
``}``, ``\\`` and ``$`` are deliberately absent: they carry BibTeX/LaTeX
markup that must survive re-tidying.
"""

SPECIAL_CHARACTERS: dict[int, str] = {
    # ASCII specials
    0x0023: "\\#",
    0x0025: "\\%",
    0x0026: "\\&",
    0x005F: "\\_",
    # Latin-1 supplement
    0x00A0: "~",
    0x00A1: "{\\textexclamdown}",
    0x00A2: "{\\textcent}",
    0x00A3: "{\\textsterling}",
    0x00A5: "{\\textyen}",
    0x00A7: "{\\S}",
    0x00A9: "{\\textcopyright}",
    0x00AB: "{\\guillemotleft}",
    0x00AE: "{\\textregistered}",
    0x00B0: "{\\textdegree}",
    0x00B1: "$\\pm$",
    0x00B5: "{\\textmu}",
    0x00B6: "{\\P}",
    0x00B7: "{\\textperiodcentered}",
    0x00BB: "{\\guillemotright}",
    0x00BF: "{\\textquestiondown}",
    0x00C0: "{\\`A}",
    0x00C1: "{\\'A}",
    0x00C2: "{\\^A}",
    0x00C3: "{\\~A}",
    0x00C4: '{\\"A}',
    0x00C5: "{\\AA}",
    0x00C6: "{\\AE}",
    0x00C7: "{\\c{C}}",
    0x00C8: "{\\`E}",
    0x00C9: "{\\'E}",
    0x00CA: "{\\^E}",
    0x00CB: '{\\"E}',
    0x00CC: "{\\`I}",
    0x00CD: "{\\'I}",
    0x00CE: "{\\^I}",
    0x00CF: '{\\"I}',
    0x00D0: "{\\DH}",
    0x00D1: "{\\~N}",
    0x00D2: "{\\`O}",
    0x00D3: "{\\'O}",
    0x00D4: "{\\^O}",
    0x00D5: "{\\~O}",
    0x00D6: '{\\"O}',
    0x00D7: "$\\times$",
    0x00D8: "{\\O}",
    0x00D9: "{\\`U}",
    0x00DA: "{\\'U}",
    0x00DB: "{\\^U}",
    0x00DC: '{\\"U}',
    0x00DD: "{\\'Y}",
    0x00DE: "{\\TH}",
    0x00DF: "{\\ss}",
    0x00E0: "{\\`a}",
    0x00E1: "{\\'a}",
    0x00E2: "{\\^a}",
    0x00E3: "{\\~a}",
    0x00E4: '{\\"a}',
    0x00E5: "{\\aa}",
    0x00E6: "{\\ae}",
    0x00E7: "{\\c{c}}",
    0x00E8: "{\\`e}",
    0x00E9: "{\\'e}",
    0x00EA: "{\\^e}",
    0x00EB: '{\\"e}',
    0x00EC: "{\\`\\i}",
    0x00ED: "{\\'\\i}",
    0x00EE: "{\\^\\i}",
    0x00EF: '{\\"\\i}',
    0x00F0: "{\\dh}",
    0x00F1: "{\\~n}",
    0x00F2: "{\\`o}",
    0x00F3: "{\\'o}",
    0x00F4: "{\\^o}",
    0x00F5: "{\\~o}",
    0x00F6: '{\\"o}',
    0x00F7: "$\\div$",
    0x00F8: "{\\o}",
    0x00F9: "{\\`u}",
    0x00FA: "{\\'u}",
    0x00FB: "{\\^u}",
    0x00FC: '{\\"u}',
    0x00FD: "{\\'y}",
    0x00FE: "{\\th}",
    0x00FF: '{\\"y}',
    # Latin extended-A
    0x0100: "{\\=A}",
    0x0101: "{\\=a}",
    0x0102: "{\\u{A}}",
    0x0103: "{\\u{a}}",
    0x0104: "{\\k{A}}",
    0x0105: "{\\k{a}}",
    0x0106: "{\\'C}",
    0x0107: "{\\'c}",
    0x010C: "{\\v{C}}",
    0x010D: "{\\v{c}}",
    0x010E: "{\\v{D}}",
    0x010F: "{\\v{d}}",
    0x0110: "{\\DJ}",
    0x0111: "{\\dj}",
    0x0112: "{\\=E}",
    0x0113: "{\\=e}",
    0x0116: "{\\.E}",
    0x0117: "{\\.e}",
    0x0118: "{\\k{E}}",
    0x0119: "{\\k{e}}",
    0x011A: "{\\v{E}}",
    0x011B: "{\\v{e}}",
    0x011E: "{\\u{G}}",
    0x011F: "{\\u{g}}",
    0x0122: "{\\c{G}}",
    0x0123: "{\\c{g}}",
    0x012A: "{\\=I}",
    0x012B: "{\\=\\i}",
    0x012E: "{\\k{I}}",
    0x012F: "{\\k{i}}",
    0x0130: "{\\.I}",
    0x0131: "{\\i}",
    0x0136: "{\\c{K}}",
    0x0137: "{\\c{k}}",
    0x0139: "{\\'L}",
    0x013A: "{\\'l}",
    0x013B: "{\\c{L}}",
    0x013C: "{\\c{l}}",
    0x013D: "{\\v{L}}",
    0x013E: "{\\v{l}}",
    0x0141: "{\\L}",
    0x0142: "{\\l}",
    0x0143: "{\\'N}",
    0x0144: "{\\'n}",
    0x0145: "{\\c{N}}",
    0x0146: "{\\c{n}}",
    0x0147: "{\\v{N}}",
    0x0148: "{\\v{n}}",
    0x014C: "{\\=O}",
    0x014D: "{\\=o}",
    0x0150: "{\\H{O}}",
    0x0151: "{\\H{o}}",
    0x0152: "{\\OE}",
    0x0153: "{\\oe}",
    0x0154: "{\\'R}",
    0x0155: "{\\'r}",
    0x0158: "{\\v{R}}",
    0x0159: "{\\v{r}}",
    0x015A: "{\\'S}",
    0x015B: "{\\'s}",
    0x015E: "{\\c{S}}",
    0x015F: "{\\c{s}}",
    0x0160: "{\\v{S}}",
    0x0161: "{\\v{s}}",
    0x0162: "{\\c{T}}",
    0x0163: "{\\c{t}}",
    0x0164: "{\\v{T}}",
    0x0165: "{\\v{t}}",
    0x016A: "{\\=U}",
    0x016B: "{\\=u}",
    0x016E: "{\\r{U}}",
    0x016F: "{\\r{u}}",
    0x0170: "{\\H{U}}",
    0x0171: "{\\H{u}}",
    0x0172: "{\\k{U}}",
    0x0173: "{\\k{u}}",
    0x0178: '{\\"Y}',
    0x0179: "{\\'Z}",
    0x017A: "{\\'z}",
    0x017B: "{\\.Z}",
    0x017C: "{\\.z}",
    0x017D: "{\\v{Z}}",
    0x017E: "{\\v{z}}",
    # Greek
    0x0393: "$\\Gamma$",
    0x0394: "$\\Delta$",
    0x0398: "$\\Theta$",
    0x039B: "$\\Lambda$",
    0x039E: "$\\Xi$",
    0x03A0: "$\\Pi$",
    0x03A3: "$\\Sigma$",
    0x03A6: "$\\Phi$",
    0x03A8: "$\\Psi$",
    0x03A9: "$\\Omega$",
    0x03B1: "$\\alpha$",
    0x03B2: "$\\beta$",
    0x03B3: "$\\gamma$",
    0x03B4: "$\\delta$",
    0x03B5: "$\\epsilon$",
    0x03B6: "$\\zeta$",
    0x03B7: "$\\eta$",
    0x03B8: "$\\theta$",
    0x03B9: "$\\iota$",
    0x03BA: "$\\kappa$",
    0x03BB: "$\\lambda$",
    0x03BC: "$\\mu$",
    0x03BD: "$\\nu$",
    0x03BE: "$\\xi$",
    0x03C0: "$\\pi$",
    0x03C1: "$\\rho$",
    0x03C3: "$\\sigma$",
    0x03C4: "$\\tau$",
    0x03C5: "$\\upsilon$",
    0x03C6: "$\\phi$",
    0x03C7: "$\\chi$",
    0x03C8: "$\\psi$",
    0x03C9: "$\\omega$",
    # Punctuation and symbols
    0x2013: "--",
    0x2014: "---",
    0x2018: "`",
    0x2019: "'",
    0x201C: "``",
    0x201D: "''",
    0x2020: "{\\dag}",
    0x2021: "{\\ddag}",
    0x2026: "{\\ldots}",
    0x20AC: "{\\texteuro}",
    0x2122: "{\\texttrademark}",
    0x2190: "$\\leftarrow$",
    0x2192: "$\\rightarrow$",
    0x2212: "$-$",
    0x221E: "$\\infty$",
    0x2248: "$\\approx$",
    0x2260: "$\\neq$",
    0x2264: "$\\leq$",
    0x2265: "$\\geq$",
}
