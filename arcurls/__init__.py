"""arcurls - find urls in arc files"""
