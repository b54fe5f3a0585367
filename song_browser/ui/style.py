from __future__ import annotations


def load_qss() -> str:
    return """
*{font-family:"Segoe UI";font-size:10.5pt;}
QMainWindow{background:#ffffff;}
QWidget{color:#1c1c1e;}
QFrame#Card{background:#ffffff;border:1px solid #e5e5ea;border-radius:14px;}
QFrame#Card2{background:#f7f7f9;border:1px solid #e5e5ea;border-radius:14px;}
QFrame#DetailCard{border-radius:20px;background:qlineargradient(x1:0,y1:0,x2:0,y2:1,stop:0 #ffffff,stop:1 #b3d4ff);}
QLabel#Title{font-size:18pt;font-weight:700;}
QLabel#Sub{color:#8e8e93;}
QLabel#Caption{color:#8e8e93;font-size:9pt;}
QLabel#Artwork{background:rgba(142,142,147,0.3);border-radius:20px;}
QPushButton{background:transparent;border:none;padding:8px 10px;border-radius:12px;color:#007aff;}
QPushButton:hover{background:#eef4ff;}
QPushButton:disabled{color:#c7c7cc;}
QPushButton#Primary{background:#007aff;color:#fff;font-weight:700;border-radius:16px;padding:8px 14px;}
QPushButton#Primary:disabled{background:#c7c7cc;}
QPushButton#Transport{font-size:22pt;}
QPushButton#TransportMain{font-size:30pt;}
QTableView{background:transparent;border:none;}
QHeaderView::section{background:#f7f7f9;color:#8e8e93;padding:8px;border:none;border-bottom:1px solid #e5e5ea;}
QTableView::item{padding:6px;border-bottom:1px solid #f0f0f2;}
QTableView::item:selected{background:#d6e8ff;color:#000;}
QProgressBar{border:none;background:#e5e5ea;height:6px;border-radius:3px;}
QProgressBar::chunk{background:#007aff;border-radius:3px;}
QSlider::groove:horizontal{height:4px;background:#d1d1d6;border-radius:2px;}
QSlider::sub-page:horizontal{background:#007aff;border-radius:2px;}
QSlider::handle:horizontal{background:#ffffff;border:1px solid #c7c7cc;width:14px;margin:-6px 0;border-radius:7px;}
QPlainTextEdit{background:#ffffff;border:1px solid #e5e5ea;border-radius:12px;padding:8px;color:#3a3a3c;}
"""
