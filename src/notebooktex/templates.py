"""LaTeX templates for generated book projects."""

INCLUDE_MARKER = "% INCLUDE NOTEBOOKS"

_PREAMBLE = r"""%! TeX program = lualatex
\documentclass[12pt, oneside]{book}

\usepackage{listings}

\pagestyle{plain}
\usepackage{pdfpages}
\usepackage{titlesec}
"""

_MATH_PACKAGES = r"""
%%%% MATH PACKAGES %%%%

\usepackage{amsfonts, amsthm,amsmath,amssymb,mathtools}
\usepackage{bbm}
\usepackage{bm}
\usepackage{thmtools} % List of Theorems

%%%%%%%%%%%%%%%%%%%%%%%
"""

_PACKAGES = r"""
\usepackage[square,numbers]{natbib}
\usepackage[bookmarks=true,bookmarksopen=false,bookmarksnumbered=true,colorlinks=true,linkcolor=blue]{hyperref}
\usepackage{graphicx}
\usepackage{float}
\usepackage{enumerate}
\usepackage{xcolor}

%%%%%%% PYTHON %%%%%%%%%
\input{python_font}
\input{python_listings}

\lstdefinelanguage{PythonLocal}{
    language = Python, % inherit Python lang. to add keywords
    morekeywords = [2]{np, plt}, % define more modules
}
%%%%%%%%%%%%%%%%%%%%%%%%


%%%%%%%%%% BOOK INFORMATION %%%%%%%%%%
\newcommand{\authorname}{Name}
\newcommand{\booktitle}{Title}
\newcommand{\subtitle}{Subtitle}
\newcommand{\publisher}{TBD}
\newcommand{\editionyear}{2021}
\newcommand{\isbn}{XYZ}   % replace this with your own ISBN

\title{\booktitle}
\author{\authorname}

%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%
"""

_MATH_STYLE = r"""
%%%%%%%%%%%% MATH STYLE  %%%%%%%%%%%%%
\newtheoremstyle{bfnote}%
  {}{}
  {}{}
  {\bfseries}{.}
  { }{\thmname{#1}\thmnumber{ #2}\thmnote{ (#3)}}
\theoremstyle{bfnote}
\newenvironment{prf}[1][Proof]{\textbf{#1.} }{\qed}
\newtheorem{theorem}{Theorem}[section]
\newtheorem{definition}[theorem]{Definition}
\newtheorem{exer}{Exercise}[section]
\newtheorem{lemma}[theorem]{Lemma}
\newtheorem{corollary}[theorem]{Corollary}
\newtheorem{proposition}[theorem]{Proposition}

\newtheorem{note}{Note}[section]
\newtheorem{example}{Example}[section]
%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%%
"""

_DOCUMENT = r"""
\begin{document}

% \includepdf{cover.pdf}

\frontmatter
\input{frontmatter/titlepage}
\input{frontmatter/copyright}
% \include{preface}

\newpage
\tableofcontents
{theorems}
\mainmatter
\newpage

""" + INCLUDE_MARKER + r"""

\bibliography{ref}

\bibliographystyle{plainnat}

\include{appendix}

\end{document}
"""

MAIN_TEMPLATES = {
    "book": _PREAMBLE + _PACKAGES + _DOCUMENT.replace("{theorems}", ""),
    "mathbook": (
        _PREAMBLE
        + _MATH_PACKAGES
        + _PACKAGES
        + _MATH_STYLE
        + _DOCUMENT.replace("{theorems}", "\n%\\listoftheorems[onlynamed]\n")
    ),
}

PYTHON_LISTINGS = r"""\definecolor{codebackground}{rgb}{0.97,0.97,0.97}
\definecolor{codekeyword}{rgb}{0.58,0.0,0.63}
\definecolor{codestring}{rgb}{0.1,0.5,0.1}
\definecolor{codecomment}{rgb}{0.45,0.45,0.45}

\lstdefinestyle{python}{
    backgroundcolor=\color{codebackground},
    basicstyle=\ttfamily\small,
    keywordstyle=\color{codekeyword}\bfseries,
    keywordstyle=[2]\color{blue},
    stringstyle=\color{codestring},
    commentstyle=\color{codecomment}\itshape,
    breaklines=true,
    showstringspaces=false,
    columns=fullflexible,
    keepspaces=true,
    frame=single,
    rulecolor=\color{codebackground},
    extendedchars=true,
    inputencoding=utf8,
}
"""

DEFAULT_FONT = "% Default monospace font\n"

FONT_TEMPLATE = r"""\usepackage{fontspec}
\setmonofont{%s}[
    Path = ./fonts/,
    Extension = .ttf,
%s]
"""

TITLEPAGE = r"""\begin{titlepage}
    \centering
    {\Huge\bfseries \booktitle \par}
    \vspace{1cm}
    {\Large \subtitle \par}
    \vfill
    {\Large \authorname \par}
\end{titlepage}
"""

COPYRIGHT = r"""\thispagestyle{empty}
\vspace*{\fill}
\noindent Copyright \copyright\ \editionyear\ \authorname \\
\noindent Published by \publisher \\
\noindent ISBN: \isbn
"""

APPENDIX = "\\appendix\n"

REFERENCES = "% BibTeX references\n"
